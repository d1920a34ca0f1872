"""
Logging configuration for the Exercise Tracker.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and routes Uvicorn's own loggers through
it, so request lines and application messages share one format::

    2023-01-15 10:00:00 [INFO] exercise_tracker.app.services.user_service: Created user ...

``run.py`` starts Uvicorn with ``log_config=None`` for this reason.
Configuration happens at most once per process.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and hand Uvicorn's loggers over to it.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall
        back to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log records to, in addition to the
        console.
    """
    root = logging.getLogger()
    if root.handlers:
        # pytest and repeated ``create_app`` calls land here.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
