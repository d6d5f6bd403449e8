"""
renderer/export.py

Copy / download of a GenerationResult. The code text is never transformed.
"""

from pathlib import Path
from urllib.parse import quote

import pyperclip

from renderer.preview import normalize_language

# characters encodeURIComponent leaves alone
_URI_SAFE = "-_.!~*'()"


def download_extension(language: str | None) -> str:
    """jsx -> 'jsx', everything else -> 'html'."""
    return "jsx" if normalize_language(language) == "jsx" else "html"


def download_filename(language: str | None) -> str:
    return f"code.{download_extension(language)}"


def to_data_uri(code: str) -> str:
    return "data:text/plain;charset=utf-8," + quote(code, safe=_URI_SAFE)


def copy(result) -> None:
    pyperclip.copy(result.code)


def download(result, directory: str | Path = ".") -> Path:
    """Write the code to <directory>/code.<ext> and return the path."""
    target = Path(directory) / download_filename(result.language)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(result.code, encoding="utf-8", newline="")
    return target
