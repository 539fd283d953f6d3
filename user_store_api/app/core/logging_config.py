"""
Logging setup for the service.

The root logger gets a single console handler at ``WARNING`` so that
third‑party libraries stay quiet; the ``user_store_api`` logger is set
to the configured level.  Per‑request lines from ``uvicorn.access`` and
``httpx`` (used by the test client) are suppressed unless
``ACCESS_LOG`` is enabled, since the service logs its own store
operations.  Calling ``setup_logging`` again never duplicates handlers.
"""

import logging
from pathlib import Path

from .config import Settings

APP_LOGGER = "user_store_api"
REQUEST_LOGGERS = ("uvicorn.access", "httpx")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == str(path)
        for handler in logger.handlers
    )


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure logging from ``settings`` and return the application logger."""
    root = logging.getLogger()
    formatter = logging.Formatter(LOG_FORMAT)
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        root.setLevel(logging.WARNING)

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    if settings.log_file:
        log_path = Path(settings.log_file).resolve()
        if not _has_file_handler(app_logger, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            app_logger.addHandler(file_handler)

    request_level = logging.INFO if settings.access_log else logging.WARNING
    for name in REQUEST_LOGGERS:
        logging.getLogger(name).setLevel(request_level)
    return app_logger
