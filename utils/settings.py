"""
utils/settings.py

Runtime configuration read from the environment (.env supported).
Values are looked up at call time so tests can monkeypatch the environment.
"""

import os
from dotenv import load_dotenv

# load .env keys
load_dotenv()

DEFAULT_MODEL = "llama-3.3-70b-versatile"


def environment() -> str:
    return os.getenv("ENVIRONMENT", "development").strip().lower()


def is_production() -> bool:
    """True when error details must not be echoed to callers."""
    return environment() == "production"


def groq_api_key() -> str | None:
    return os.getenv("GROQ_API_KEY")


def groq_model() -> str:
    return os.getenv("GROQ_MODEL", DEFAULT_MODEL)


def codegen_temperature() -> float:
    return float(os.getenv("CODEGEN_TEMPERATURE", "0.7"))


def codegen_max_tokens() -> int:
    return int(os.getenv("CODEGEN_MAX_TOKENS", "2000"))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def gateway_url() -> str:
    return os.getenv("GATEWAY_URL", "http://127.0.0.1:8000")


def gateway_timeout() -> int:
    return int(os.getenv("GATEWAY_TIMEOUT", "60"))
