"""
Centralised logging configuration.

Call `configure_logging()` once at app startup. Each module then uses:

    import logging
    logger = logging.getLogger(__name__)
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure root logger with a single timestamped stdout handler."""
    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt = "%Y-%m-%dT%H:%M:%S"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers = [handler]

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
