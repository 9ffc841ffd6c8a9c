"""Logging setup shared by the app and the `python main.py` entrypoint."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the `shorturl_app` logger (once)."""
    global _configured

    logger = logging.getLogger("shorturl_app")
    logger.setLevel(level.upper())

    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    _configured = True
