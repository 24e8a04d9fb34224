"""
Logging setup for the service.

Modules log through ``logging.getLogger(__name__)``; this installs a single
stream handler on the package logger once at startup.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the ``shorturl_app`` logger (idempotent)."""
    logger = logging.getLogger("shorturl_app")
    logger.setLevel(level.upper())

    if not any(getattr(h, "_shorturl_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._shorturl_handler = True
        logger.addHandler(handler)

    return logger
