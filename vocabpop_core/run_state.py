"""
Shared running flag observed by the rotation scheduler.
"""

from __future__ import annotations

import threading


class RunState:
    """
    Thread-safe, one-way "running" flag. Any context may call :meth:`stop`;
    once stopped the state never returns to running.
    """

    def __init__(self) -> None:
        self._stopped = threading.Event()

    @property
    def is_running(self) -> bool:
        return not self._stopped.is_set()

    def stop(self) -> None:
        self._stopped.set()

    def wait_stopped(self, timeout: float | None = None) -> bool:
        """Block until stopped or ``timeout`` elapses; return whether stopped."""
        return self._stopped.wait(timeout)
