"""Logging setup for Task List.

Textual owns the terminal while the app runs, so records go to a rotating
file under ~/.tasklist/logs. In dev mode (TASKLIST_DEV=true) they are also
mirrored to the ``textual console`` through TextualHandler.

Every module takes its logger from get_logger(__name__); setup_logging() is
called once by the entry point before the UI is imported.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Tuple


LOG_DIR = Path.home() / ".tasklist" / "logs"
LOG_FILE = LOG_DIR / "tasklist.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

DEFAULT_LEVEL = "INFO"


def resolve_log_level(log_level: Optional[str] = None) -> Tuple[str, int]:
    """Turn a level name into (name, numeric level).

    Args:
        log_level: Level name in any case. If None, TASKLIST_LOG_LEVEL is
                  used. Unknown names resolve to INFO.

    Returns:
        The normalized level name and its logging constant
    """
    name = (log_level or os.getenv("TASKLIST_LOG_LEVEL") or DEFAULT_LEVEL).upper()
    numeric_level = logging.getLevelName(name)
    if not isinstance(numeric_level, int):
        return DEFAULT_LEVEL, logging.INFO
    return name, numeric_level


def _file_handler(formatter: logging.Formatter) -> RotatingFileHandler:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        LOG_FILE,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    use_textual_handler: bool = False
) -> None:
    """Route all Task List logging to the rotating log file.

    Calling it again replaces the previous handlers, so it is safe to call
    more than once.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL; see
                  resolve_log_level() for the fallback order
        use_textual_handler: Also send records to the Textual dev console
    """
    level_name, numeric_level = resolve_log_level(log_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handlers = [_file_handler(formatter)]
    if use_textual_handler:
        from textual.logging import TextualHandler

        textual_handler = TextualHandler()
        textual_handler.setFormatter(formatter)
        handlers.append(textual_handler)

    for handler in handlers:
        handler.setLevel(numeric_level)
        root_logger.addHandler(handler)

    logging.getLogger(__name__).info(
        f"Task List logging at {level_name} to {LOG_FILE}"
        + (" (+ textual console)" if use_textual_handler else "")
    )


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a Task List module (pass __name__)."""
    return logging.getLogger(name)
