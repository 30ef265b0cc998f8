"""
Logging setup for VocabPop.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

_LOG_INITIALISED = False
LOG_DIR_ENV = "VOCABPOP_LOG_DIR"
LOG_FILE_NAME = "vocabpop.log"


def default_log_path() -> Path:
    log_dir = os.environ.get(LOG_DIR_ENV)
    if log_dir:
        return Path(log_dir) / LOG_FILE_NAME
    return Path.home() / ".vocabpop" / "logs" / LOG_FILE_NAME


def configure(log_path: Optional[Path] = None, *, verbose: bool = False, force: bool = False) -> None:
    """
    Configure loguru for the application.

    Runs once per process unless ``force`` is given, which lets the CLI
    re-apply the console level after parsing ``--verbose``.
    """
    global _LOG_INITIALISED
    if _LOG_INITIALISED and not force:
        return
    target = log_path or default_log_path()

    # Keep console output and add a persistent file sink.
    _logger.remove()
    if sys.stderr is not None:
        _logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", enqueue=True)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        _logger.warning("Log directory {} unavailable ({}); logging to console only.", target.parent, exc)
    else:
        _logger.add(
            target,
            level="DEBUG",
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
            enqueue=True,
            backtrace=True,
            diagnose=False,
        )
    _LOG_INITIALISED = True


def get_logger():
    """Return the shared logger instance."""
    configure()
    return _logger
