"""
renderer/session.py

Client side of the generation pipeline: one prompt box, one result, two tabs.

    idle -> submitting -> result | error

At most one request is in flight; submit() while submitting is a no-op,
mirroring the disabled submit button. A failed attempt never touches the
previous result.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from renderer import export
from renderer.preview import PreviewFrame, build_preview_document, normalize_language
from utils.gateway_client import GatewayClient

logger = logging.getLogger(__name__)

IDLE = "idle"
SUBMITTING = "submitting"
RESULT = "result"
ERROR = "error"

CODE_TAB = "code"
PREVIEW_TAB = "preview"

EMPTY_PROMPT_MESSAGE = "Please enter a prompt"
GENERIC_ERROR_MESSAGE = "Error generating code"
DEFAULT_LANGUAGE = "jsx"
AUTO_PREVIEW_LANGUAGES = ("jsx", "html")

QUICK_EXAMPLES = (
    "Create a hero section with title and CTA button",
    "Build a testimonials carousel component",
    "Make a pricing table with feature checklist",
    "Design a contact form with validation",
)


@dataclass(frozen=True)
class GenerationResult:
    code: str
    language: str
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class GeneratorSession:
    def __init__(self, client: GatewayClient | None = None, frame: PreviewFrame | None = None):
        self.client = client or GatewayClient()
        self.frame = frame or PreviewFrame()
        self.prompt = ""
        self.status = IDLE
        self.error = ""
        self.result: GenerationResult | None = None
        self.active_tab = CODE_TAB
        self._lock = threading.Lock()

    # --- prompt box -----------------------------------------------------

    def set_prompt(self, text: str) -> None:
        self.prompt = text
        self.error = ""

    def use_example(self, index: int) -> None:
        self.prompt = QUICK_EXAMPLES[index]

    @property
    def is_loading(self) -> bool:
        return self.status == SUBMITTING

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and bool(self.prompt.strip())

    # --- submission -----------------------------------------------------

    def submit(self, prompt: str | None = None) -> GenerationResult | None:
        """
        Run one generation round trip. Returns the new result, or None when
        the prompt was blank, the call failed, or a submission is in flight.
        """
        with self._lock:
            if self.status == SUBMITTING:
                return None
            if prompt is not None:
                self.prompt = prompt
            if not self.prompt.strip():
                self.error = EMPTY_PROMPT_MESSAGE
                self.status = ERROR
                return None
            self.status = SUBMITTING
            self.error = ""

        try:
            data = self.client.generate(self.prompt)
        except Exception as e:
            logger.exception("Gateway call failed")
            data = {"error": str(e) or None}

        if not isinstance(data, dict) or "error" in data or "code" not in data:
            message = data.get("error") if isinstance(data, dict) else None
            self.error = message or GENERIC_ERROR_MESSAGE
            self.status = ERROR
            return None

        language = normalize_language(data.get("language"))
        result = GenerationResult(code=data["code"], language=language or DEFAULT_LANGUAGE)
        self.result = result
        self.status = RESULT

        # auto-render preview for JSX/HTML
        if language in AUTO_PREVIEW_LANGUAGES:
            self.show_preview()
        return result

    # --- tabs / preview -------------------------------------------------

    def show_code(self) -> None:
        self.active_tab = CODE_TAB

    def show_preview(self) -> None:
        self.active_tab = PREVIEW_TAB
        if self.result is not None:
            self.render_preview(self.result.code, self.result.language)

    def render_preview(self, code: str, language: str) -> str:
        document = build_preview_document(code, language)
        self.frame.load(document)
        return document

    @property
    def code_view(self) -> str:
        return self.result.code if self.result else ""

    # --- export ---------------------------------------------------------

    def copy(self) -> None:
        if self.result is not None:
            export.copy(self.result)

    def download(self, directory: str | Path = ".") -> Path | None:
        if self.result is None:
            return None
        return export.download(self.result, directory)

    def download_uri(self) -> str | None:
        if self.result is None:
            return None
        return export.to_data_uri(self.result.code)
