"""
Resolved runtime configuration for VocabPop.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from vocabpop import logger as app_logger

_LOGGER = app_logger.get_logger()

VOCAB_DIR_ENV = "VOCABPOP_VOCAB_DIR"
DEFAULT_INTERVAL_MINUTES = 1
_MIN_INTERVAL_MINUTES = 1


def default_vocab_dir() -> Path:
    return Path(os.environ.get(VOCAB_DIR_ENV, "vocab"))


@dataclass(eq=True)
class NotifierSettings:
    directory: Path = field(default_factory=default_vocab_dir)
    interval_minutes: int = DEFAULT_INTERVAL_MINUTES
    force: bool = False
    shuffle: bool = True
    use_tray: bool = True

    def __post_init__(self) -> None:
        self.directory = Path(self.directory)
        if self.interval_minutes < _MIN_INTERVAL_MINUTES:
            _LOGGER.warning(
                "Invalid interval {} minute(s). Clamping to {}.",
                self.interval_minutes,
                _MIN_INTERVAL_MINUTES,
            )
            self.interval_minutes = _MIN_INTERVAL_MINUTES

    @property
    def interval_seconds(self) -> int:
        return self.interval_minutes * 60
