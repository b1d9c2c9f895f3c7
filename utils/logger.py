"""File logging for --verbose runs."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .runtime import get_log_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_log_file_path: Optional[str] = None


def setup_logger() -> None:
    """Send records from every module to a per-run file in the log directory.

    The level comes from ``Config.LOG_LEVEL``; unknown names fall back to DEBUG.
    Only the first call has an effect.
    """
    global _log_file_path

    if _log_file_path is not None:
        return

    from config import Config

    level = getattr(logging, Config.LOG_LEVEL.upper(), logging.DEBUG)
    log_dir = Path(get_log_dir())
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"skills_installer_{datetime.now():%Y%m%d_%H%M%S}.log"

    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logging.root.addHandler(handler)
    logging.root.setLevel(level)
    _log_file_path = str(log_file)

    logging.getLogger(__name__).info(f"Logging to {log_file} at {logging.getLevelName(level)}")


def get_logger(name: str) -> logging.Logger:
    """Module logger; silent unless setup_logger() has run."""
    return logging.getLogger(name)


def get_log_file_path() -> Optional[str]:
    """Path of this run's log file, or None when logging is off."""
    return _log_file_path
