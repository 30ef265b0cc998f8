"""
Rotation scheduler cycling vocabulary entries through a notification sink.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence, Tuple

from vocabpop import logger as app_logger
from vocabpop_core.notification_sink import NotificationSink
from vocabpop_core.run_state import RunState
from vocabpop_core.signal_channel import ShowNowChannel
from vocabpop_shared.vocab_entry import VocabEntry, render_notification

DEFAULT_TICK_SECONDS = 1.0


class EmptyVocabularyError(ValueError):
    """Raised when a scheduler is requested for an empty vocabulary."""


class SchedulerState(Enum):
    IDLE = "Idle"
    SHOWING = "Showing"
    WAITING = "Waiting"
    STOPPED = "Stopped"


def build_sequence(
    entries: Iterable[VocabEntry],
    *,
    shuffle: bool,
    rng: Optional[random.Random] = None,
) -> Tuple[VocabEntry, ...]:
    """Freeze ``entries`` into the rotation order, permuting once if requested."""
    ordered = list(entries)
    if shuffle:
        (rng or random.Random()).shuffle(ordered)
    return tuple(ordered)


class RotationScheduler:
    """
    Shows one entry per interval, in cursor order, until the run state stops.

    The wait between notifications is split into ticks. Each tick checks the
    run state and the show-now channel before sleeping, so a stop request or
    an early show is honoured within one tick rather than one interval. An
    early show does not skip an entry: it displays the entry the interval
    would have displayed and restarts the interval from that moment.
    """

    def __init__(
        self,
        entries: Sequence[VocabEntry],
        sink: NotificationSink,
        *,
        interval_seconds: float,
        channel: ShowNowChannel,
        run_state: RunState,
        force: bool = False,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        sleep: Optional[Callable[[float], object]] = None,
    ) -> None:
        if not entries:
            raise EmptyVocabularyError("Cannot rotate an empty vocabulary.")
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")
        if tick_seconds <= 0:
            raise ValueError(f"tick_seconds must be positive, got {tick_seconds}")

        self._entries: Tuple[VocabEntry, ...] = tuple(entries)
        self._sink = sink
        self._interval_seconds = interval_seconds
        self._channel = channel
        self._run_state = run_state
        self._force = force
        self._tick_seconds = tick_seconds
        # Default tick wait wakes as soon as the run state stops.
        self._sleep = sleep or self._run_state.wait_stopped
        self._logger = app_logger.get_logger()

        self._cursor = 0
        self._shown_count = 0
        self._state = SchedulerState.IDLE

    @property
    def entries(self) -> Tuple[VocabEntry, ...]:
        return self._entries

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def shown_count(self) -> int:
        return self._shown_count

    @property
    def state(self) -> SchedulerState:
        return self._state

    def run(self) -> None:
        """Run the rotation loop on the calling thread until stopped."""
        if self._force:
            self._logger.info("Force mode: showing a single entry.")
            self._show_current()
            self._state = SchedulerState.STOPPED
            return

        self._logger.info(
            "Rotating {} entries every {} seconds.",
            len(self._entries),
            self._interval_seconds,
        )
        while self._run_state.is_running:
            self._show_current()
            if not self._wait_for_next():
                break
            self._state = SchedulerState.IDLE

        self._state = SchedulerState.STOPPED
        self._logger.info("Rotation stopped after {} notifications.", self._shown_count)

    def _show_current(self) -> None:
        self._state = SchedulerState.SHOWING
        entry = self._entries[self._cursor]
        payload = render_notification(entry)
        self._logger.debug("Showing entry #{}: {}", self._cursor, payload.title)
        self._sink.show(payload.title, payload.body)
        self._cursor = (self._cursor + 1) % len(self._entries)
        self._shown_count += 1

    def _wait_for_next(self) -> bool:
        """Wait out one interval. Returns False once the run state has stopped."""
        self._state = SchedulerState.WAITING
        elapsed = 0.0
        while elapsed < self._interval_seconds:
            if not self._run_state.is_running:
                return False
            if self._channel.try_receive():
                self._logger.info("Show-now signal received; showing next entry early.")
                return True
            self._sleep(self._tick_seconds)
            elapsed += self._tick_seconds
        return self._run_state.is_running
