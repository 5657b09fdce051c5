"""Command line entry point: ``tasklist`` or ``python -m tasklist``.

Set TASKLIST_DEV=true to mirror the log to ``textual console``.
"""

import os
import sys
from typing import Optional

from tasklist.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def _dev_mode() -> bool:
    return os.getenv("TASKLIST_DEV", "").lower() == "true"


def main(args: Optional[list[str]] = None) -> int:
    """Start the task list screen and block until it is closed.

    Args:
        args: Command-line arguments; accepted for the console script
              signature, none are defined

    Returns:
        0 when the app closes normally or on Ctrl+C, 1 if it crashed
    """
    if args is None:
        args = sys.argv[1:]

    setup_logging(use_textual_handler=_dev_mode())

    # Imported here so the UI loads with logging already configured
    from tasklist.ui.app import TaskListApp

    try:
        TaskListApp().run()
    except KeyboardInterrupt:
        logger.info("Task List interrupted")
        return 0
    except Exception:
        logger.error("Task List crashed", exc_info=True)
        return 1

    logger.info("Task List closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
