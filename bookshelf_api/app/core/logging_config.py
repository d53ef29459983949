"""
Logging configuration for the Bookshelf API.

``setup_logging`` installs one console handler (plus a file handler
when ``LOG_FILE`` is set) on the root logger and hands uvicorn's own
loggers over to it, so server, access and application records share
one format.  ``run.py`` starts uvicorn with ``log_config=None`` so the
server does not replace these handlers with its defaults.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Names given to the handlers this module installs, so repeated calls
# to ``create_app`` find and reuse them instead of stacking new ones.
CONSOLE_HANDLER_NAME = "bookshelf.console"
FILE_HANDLER_NAME = "bookshelf.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# uvicorn accepts only these level names for ``log_level``.
_UVICORN_LEVELS = (
    (logging.CRITICAL, "critical"),
    (logging.ERROR, "error"),
    (logging.WARNING, "warning"),
    (logging.INFO, "info"),
)


def resolve_level(name: str) -> int:
    """Return the numeric level for a level name such as ``"warn"``.

    Only real level names are accepted; anything else (including
    module constants like ``BASIC_FORMAT``) falls back to ``INFO``.
    """
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def uvicorn_level(name: str) -> str:
    """Map a level name to the closest name uvicorn understands."""
    level = resolve_level(name)
    for threshold, uvicorn_name in _UVICORN_LEVELS:
        if level >= threshold:
            return uvicorn_name
    return "debug"


def _find_handler(logger: logging.Logger, name: str):
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def setup_logging(app_settings: Settings) -> None:
    """Configure the root logger and uvicorn's loggers from ``app_settings``.

    Safe to call repeatedly: the level is updated every time, handlers
    are only added once.
    """
    root = logging.getLogger()
    root.setLevel(resolve_level(app_settings.log_level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if _find_handler(root, CONSOLE_HANDLER_NAME) is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if app_settings.log_file and _find_handler(root, FILE_HANDLER_NAME) is None:
        log_path = Path(app_settings.log_file).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
