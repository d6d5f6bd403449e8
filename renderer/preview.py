"""
renderer/preview.py

Builds the throwaway HTML document used to render generated code inside a
sandboxed frame.

- Script dialects (jsx, javascript): React + ReactDOM + Babel standalone are
  loaded from unpkg, the code is inlined as text/babel and <App /> is mounted
  into the single #root element only if the code defines it.
- Markup (html, and any tag we don't recognize): the code IS the document.

Documents are rebuilt on every call; nothing is cached.
"""

import logging
import re

logger = logging.getLogger(__name__)

SCRIPT_DIALECTS = frozenset({"jsx", "javascript"})
MARKUP_DIALECTS = frozenset({"html"})

# iframe sandbox tokens: scripts only (no same-origin, navigation or forms)
SANDBOX_POLICY = "allow-scripts"

RUNTIME_SCRIPTS = (
    "https://unpkg.com/react@18/umd/react.production.min.js",
    "https://unpkg.com/react-dom@18/umd/react-dom.production.min.js",
    "https://unpkg.com/@babel/standalone/babel.min.js",
)

MOUNT_POINT = '<div id="root"></div>'

# tag names are case-insensitive: </SCRIPT closes the element too
_CLOSING_SCRIPT = re.compile(r"</(script)", re.IGNORECASE)

_SCRIPT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <script crossorigin src="{react}"></script>
  <script crossorigin src="{react_dom}"></script>
  <script src="{babel}"></script>
  <style>
    * {{ margin: 0; padding: 0; box-sizing: border-box; }}
    body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif; }}
    #root {{ min-height: 100vh; }}
  </style>
</head>
<body>
  {mount}
  <script type="text/babel">
{code}
    const root = ReactDOM.createRoot(document.getElementById('root'));
    if (typeof App !== 'undefined') {{
      root.render(<App />);
    }}
  </script>
</body>
</html>
"""


def normalize_language(language: str | None) -> str:
    """Canonical form of a language tag: trimmed, lowercase."""
    return (language or "").strip().lower()


def render_mode(language: str | None) -> str:
    """'script' or 'markup'. Unknown tags fall back to markup."""
    lang = normalize_language(language)
    if lang in SCRIPT_DIALECTS:
        return "script"
    if lang not in MARKUP_DIALECTS:
        logger.info("Unrecognized preview language %r; rendering as markup", language)
    return "markup"


def _inline_script(code: str) -> str:
    # a literal </script would close the host element early
    return _CLOSING_SCRIPT.sub(r"<\\/\1", code)


def build_preview_document(code: str, language: str | None) -> str:
    if render_mode(language) == "markup":
        return code

    react, react_dom, babel = RUNTIME_SCRIPTS
    return _SCRIPT_TEMPLATE.format(
        react=react,
        react_dom=react_dom,
        babel=babel,
        mount=MOUNT_POINT,
        code=_inline_script(code),
    )


class PreviewFrame:
    """
    Isolated rendering surface: the srcdoc the host assigns and the
    iframe sandbox tokens it is loaded under.
    """

    def __init__(self, title: str = "Code Preview"):
        self.title = title
        self.sandbox = SANDBOX_POLICY
        self.srcdoc: str | None = None

    def load(self, document: str) -> None:
        self.srcdoc = document
