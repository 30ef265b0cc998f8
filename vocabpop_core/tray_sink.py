"""
Tray balloon notifications backed by QSystemTrayIcon.
"""

from __future__ import annotations

import threading
from typing import Callable

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QSystemTrayIcon

from vocabpop import logger as app_logger
from vocabpop_core.notification_sink import NotificationUnavailableError

MESSAGE_TIMEOUT_MS = 5000


class TrayNotificationSink(QObject):
    """
    Shows entries as tray balloon messages.

    ``show`` may be called from the scheduler thread: it only reads a
    thread-safe visibility flag, and the request travels through a Qt signal
    so the tray icon is touched solely on the thread that owns it. The owner
    reports visibility changes through :meth:`set_tray_visible`.
    """

    displayRequested = Signal(str, str)

    def __init__(
        self,
        tray: QSystemTrayIcon,
        *,
        timeout_ms: int = MESSAGE_TIMEOUT_MS,
        supports_messages: Callable[[], bool] = QSystemTrayIcon.supportsMessages,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._tray = tray
        self._timeout_ms = timeout_ms
        self._supports_messages = supports_messages
        self._tray_visible = threading.Event()
        self._logger = app_logger.get_logger()
        self.displayRequested.connect(self._display)  # type: ignore[arg-type]

    def set_tray_visible(self, visible: bool) -> None:
        if visible:
            self._tray_visible.set()
        else:
            self._tray_visible.clear()

    def show(self, title: str, body: str) -> None:
        if not self._supports_messages():
            raise NotificationUnavailableError("Tray messages are not supported on this platform.")
        if not self._tray_visible.is_set():
            raise NotificationUnavailableError("Tray icon is not visible.")
        self.displayRequested.emit(title, body)

    def _display(self, title: str, body: str) -> None:
        if not self._tray.isVisible():
            self._logger.warning("Tray icon hidden before '{}' could be shown; dropping it.", title)
            return
        self._tray.showMessage(
            title,
            body,
            QSystemTrayIcon.MessageIcon.Information,
            self._timeout_ms,
        )
