"""
"Show now" channel bridging the tray menu into the scheduler's wait loop.
"""

from __future__ import annotations

import threading


class ShowNowChannel:
    """
    Presence-only signal. Any number of :meth:`send` calls between two
    :meth:`try_receive` calls collapse into a single pending signal.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending = False

    def send(self) -> None:
        with self._lock:
            self._pending = True

    def try_receive(self) -> bool:
        """Consume the pending signal, if any, without blocking."""
        with self._lock:
            pending = self._pending
            self._pending = False
        return pending
