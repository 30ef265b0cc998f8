"""
Notification sinks: the capability that puts a title/body pair in front of the user.
"""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

from vocabpop import logger as app_logger


class NotificationUnavailableError(RuntimeError):
    """Raised by a platform sink that cannot display notifications right now."""


def _encodable(text: str, encoding: Optional[str]) -> str:
    """Replace characters the target stream cannot encode (e.g. kanji on cp1252)."""
    if not encoding:
        return text
    try:
        return text.encode(encoding, errors="replace").decode(encoding)
    except LookupError:
        return text


class NotificationSink(Protocol):
    def show(self, title: str, body: str) -> None:
        ...


class ConsoleNotificationSink:
    """Text surface used when no platform notification mechanism is usable."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def show(self, title: str, body: str) -> None:
        stream = self._stream or sys.stdout
        if stream is None:
            return
        stream.write(_encodable(f"{title}\n{body}\n", getattr(stream, "encoding", None)))
        stream.flush()


class FallbackNotificationSink:
    """
    Delivers through ``primary`` and, if that raises, through ``fallback``.
    Errors never reach the caller.
    """

    def __init__(self, primary: NotificationSink, fallback: NotificationSink) -> None:
        self.primary = primary
        self.fallback = fallback
        self._logger = app_logger.get_logger()

    def show(self, title: str, body: str) -> None:
        try:
            self.primary.show(title, body)
            return
        except Exception as exc:  # noqa: BLE001
            self._logger.warning("Notification error: {}. Falling back to console output.", exc)
        try:
            self.fallback.show(title, body)
        except Exception as exc:  # noqa: BLE001
            self._logger.error("Fallback notification failed for '{}': {}", title, exc)
