import logging
import sys

from utils import settings

LOG_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_configured = False


def setup_logging() -> logging.Logger:
    """Configure the root logger once; later calls only return it."""
    global _configured
    root = logging.getLogger()
    if _configured:
        return root

    root.setLevel(getattr(logging, settings.log_level(), logging.INFO))
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # Suppress noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _configured = True
    root.info("Logging initialized (env=%s)", settings.environment())
    return root
