# utils/llm.py
import logging
from typing import Protocol

import groq
from groq import Groq

from utils import settings
from utils.errors import UpstreamError

logger = logging.getLogger(__name__)


class ChatRateLimited(UpstreamError):
    """Raised when Groq returns HTTP 429 (rate limit)."""
    pass


class TextCompletionProvider(Protocol):
    """prompt + system instruction + limits -> completion text, or UpstreamError."""

    def complete(self, system: str, prompt: str, temperature: float, max_tokens: int) -> str:
        ...


class GroqCompletionProvider:
    """
    Hosted completion over the Groq chat API.
    The client is created on first use so the app can boot without a key.
    """

    def __init__(self, api_key: str | None = None, model: str | None = None):
        self.api_key = api_key
        self.model = model or settings.groq_model()
        self._client: Groq | None = None

    def _get_client(self) -> Groq:
        if self._client is None:
            key = self.api_key or settings.groq_api_key()
            if not key:
                raise UpstreamError("Missing GROQ_API_KEY in environment (.env)")
            self._client = Groq(api_key=key)
        return self._client

    def complete(self, system: str, prompt: str, temperature: float, max_tokens: int) -> str:
        messages = [
            {"role": "system", "content": system},
            {"role": "user", "content": prompt},
        ]
        return chat(self._get_client(), self.model, messages,
                    max_tokens=max_tokens, temperature=temperature)


def chat(client: Groq, model: str, messages, max_tokens: int = 2000, temperature: float = 0.7) -> str:
    """
    messages = [{"role": "system"|"user"|"assistant", "content": "..."}]
    Raises ChatRateLimited on 429 and UpstreamError on any other API failure
    or an empty completion.
    """
    try:
        resp = client.chat.completions.create(
            model=model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )
    except groq.RateLimitError as e:
        raise ChatRateLimited(str(e)) from e
    except groq.APIError as e:
        raise UpstreamError(str(e)) from e

    try:
        content = (resp.choices[0].message.content or "").strip()
    except (AttributeError, IndexError, TypeError) as e:
        raise UpstreamError(f"Malformed completion: {e}") from e
    if not content:
        raise UpstreamError("Empty completion from model")
    return _strip_code_fences(content)


def _strip_code_fences(text: str) -> str:
    t = (text or "").strip()
    if t.startswith("```"):
        parts = t.split("```")
        if len(parts) >= 2:
            body = parts[1].strip()
            # If first line is a language tag, drop it
            lines = body.splitlines()
            if lines and len(lines[0]) <= 20 and lines[0].isalpha():
                body = "\n".join(lines[1:])
            return body.strip()
    return t
