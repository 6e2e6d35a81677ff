"""
Logging configuration for the application.

``setup_logging`` may run several times in one process: once for the
module level ``app`` and again for every ``create_app(settings)``
call, e.g. in tests or when embedding the service.  Each call applies
its own level and log file.  Only the console handler is shared, so
repeated calls never print a line twice.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "product_catalog_console"


def _formatter() -> logging.Formatter:
    return logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)


def _has_file_handler(logger: logging.Logger, log_path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.  Always
        applied, even when logging was configured before.
    logfile : Optional[str]
        Path to a file to log messages to.  A file handler is added
        unless one for the same file is already attached.  If omitted
        or empty, no file handler is added.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in root.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(_formatter())
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_file_handler(root, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(_formatter())
            root.addHandler(file_handler)
