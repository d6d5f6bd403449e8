# utils/gateway_client.py
import requests
from urllib.parse import urljoin

from utils import settings

FALLBACK_HTTP_ERROR = "Failed to generate code"


class GatewayClient:
    """
    Minimal HTTP client for the code generation gateway.
    - .request() never raises: failures come back as {"error": ..., "status_code": ...}
    - .generate(prompt) -> {"code", "language"} or an error dict
    """
    def __init__(self, base_url: str | None = None, timeout: int | None = None):
        # ensure a trailing slash so urljoin works reliably
        self.base_url = (base_url or settings.gateway_url()).rstrip("/") + "/"
        self.timeout = settings.gateway_timeout() if timeout is None else timeout

    def _url(self, path: str) -> str:
        # accept "/generate" or "generate"
        return urljoin(self.base_url, path.lstrip("/"))

    def request(self, method: str, path: str, json: dict | None = None):
        url = self._url(path)
        try:
            resp = requests.request(method.upper(), url, json=json, timeout=self.timeout)
            resp.raise_for_status()
            try:
                return resp.json()
            except ValueError:
                return {"raw": resp.text, "status_code": resp.status_code}
        except requests.HTTPError as e:
            # prefer the gateway's own {"error": ...} message
            status = e.response.status_code if e.response is not None else None
            message = FALLBACK_HTTP_ERROR
            try:
                body = e.response.json() if e.response is not None else {}
                if isinstance(body, dict) and body.get("error"):
                    message = str(body["error"])
            except ValueError:
                pass
            return {"error": message, "status_code": status}
        except requests.RequestException as e:
            return {"error": str(e) or None, "status_code": None}

    def post(self, path: str, json: dict | None = None):
        return self.request("POST", path, json=json)

    def generate(self, prompt: str):
        return self.post("generate", {"prompt": prompt})
