"""
Logging configuration for the application.

``setup_logging`` attaches a console handler, and a file handler when
``settings.log_file`` is set, to the root logger.  It only acts on a
root logger without handlers, so building many apps in one process
(as the test suite does) configures logging once.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> List[logging.Handler]:
    """Configure the root logger and return the handlers it attached.

    ``level`` is a level name, case insensitive; unknown names mean
    ``INFO``.  An empty list is returned when the root logger was
    already configured.
    """
    root = logging.getLogger()
    if root.handlers:
        return []

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return handlers
