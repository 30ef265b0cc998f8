"""
Application coordinator wiring the rotation scheduler to the tray or the console.
"""

from __future__ import annotations

import signal
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence

from PySide6.QtCore import QObject, QTimer
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QApplication, QMenu, QStyle, QSystemTrayIcon

from vocabpop import APP_NAME, APP_VERSION
from vocabpop import logger as app_logger
from vocabpop_core.notification_sink import (
    ConsoleNotificationSink,
    FallbackNotificationSink,
    NotificationSink,
)
from vocabpop_core.rotation_scheduler import RotationScheduler
from vocabpop_core.run_state import RunState
from vocabpop_core.settings import NotifierSettings
from vocabpop_core.signal_channel import ShowNowChannel
from vocabpop_core.tray_sink import MESSAGE_TIMEOUT_MS, TrayNotificationSink
from vocabpop_shared.vocab_entry import VocabEntry

WATCH_INTERVAL_MS = 200
FORCE_LINGER_MS = MESSAGE_TIMEOUT_MS + 1000
SCHEDULER_JOIN_TIMEOUT_SECONDS = 5.0

_LOGGER = app_logger.get_logger()


@contextmanager
def interrupt_stops(run_state: RunState) -> Iterator[None]:
    """Route SIGINT to ``run_state.stop()`` for the duration of the block."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _handler(signum, frame) -> None:  # noqa: ARG001
        _LOGGER.info("Interrupt received; stopping after the current notification.")
        run_state.stop()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def run_headless(
    entries: Sequence[VocabEntry],
    settings: NotifierSettings,
    *,
    run_state: Optional[RunState] = None,
    channel: Optional[ShowNowChannel] = None,
    sink: Optional[NotificationSink] = None,
) -> RotationScheduler:
    """Run the scheduler on the calling thread with console output."""
    run_state = run_state or RunState()
    scheduler = RotationScheduler(
        entries,
        sink or ConsoleNotificationSink(),
        interval_seconds=settings.interval_seconds,
        channel=channel or ShowNowChannel(),
        run_state=run_state,
        force=settings.force,
    )
    with interrupt_stops(run_state):
        scheduler.run()
    return scheduler


@dataclass(eq=False)
class AppCoordinator(QObject):
    """Owns the tray icon and the scheduler thread for a tray session."""

    entries: Sequence[VocabEntry]
    settings: NotifierSettings
    channel: ShowNowChannel = field(default_factory=ShowNowChannel)
    run_state: RunState = field(default_factory=RunState)

    def __post_init__(self) -> None:
        super().__init__()
        self._logger = app_logger.get_logger()

        self._tray = QSystemTrayIcon(self)
        tray_icon = QApplication.style().standardIcon(QStyle.StandardPixmap.SP_MessageBoxInformation)
        self._tray.setIcon(tray_icon)
        self._tray.setToolTip(f"{APP_NAME} v{APP_VERSION}")

        self._menu = QMenu()
        self._show_now_action = QAction("Show now", self._menu)
        self._quit_action = QAction("Quit", self._menu)
        self._menu.addAction(self._show_now_action)
        self._menu.addSeparator()
        self._menu.addAction(self._quit_action)
        self._tray.setContextMenu(self._menu)

        self._show_now_action.triggered.connect(self._on_show_now)
        self._quit_action.triggered.connect(self.request_stop)

        self._tray_sink = TrayNotificationSink(self._tray, parent=self)
        sink = FallbackNotificationSink(
            self._tray_sink,
            ConsoleNotificationSink(),
        )
        self.scheduler = RotationScheduler(
            self.entries,
            sink,
            interval_seconds=self.settings.interval_seconds,
            channel=self.channel,
            run_state=self.run_state,
            force=self.settings.force,
        )
        self._thread = threading.Thread(
            target=self.scheduler.run,
            name="vocabpop-scheduler",
            daemon=True,
        )

        self._watch_timer = QTimer(self)
        self._watch_timer.setInterval(WATCH_INTERVAL_MS)
        self._watch_timer.timeout.connect(self._on_watch_timer)
        self._linger_scheduled = False

    def start(self) -> None:
        self._logger.info("Starting tray session with {} entries.", len(self.entries))
        self._tray.show()
        self._tray_sink.set_tray_visible(True)
        self._thread.start()
        self._watch_timer.start()

    def request_stop(self) -> None:
        self._logger.info("Stop requested from tray menu.")
        self.run_state.stop()

    def shutdown(self) -> None:
        self._logger.info("Shutting down tray session.")
        self._watch_timer.stop()
        self.run_state.stop()
        if self._thread.is_alive():
            self._thread.join(SCHEDULER_JOIN_TIMEOUT_SECONDS)
        self._tray_sink.set_tray_visible(False)
        self._tray.hide()
        QApplication.instance().quit()

    def _on_show_now(self) -> None:
        self._logger.info("Show now triggered from tray menu.")
        self.channel.send()

    def _on_watch_timer(self) -> None:
        if self._thread.is_alive():
            return
        if self.settings.force:
            if not self._linger_scheduled:
                # Keep the tray alive while the single balloon is on screen.
                self._linger_scheduled = True
                QTimer.singleShot(FORCE_LINGER_MS, self.shutdown)
            return
        self.shutdown()


def run_tray_app(
    entries: Sequence[VocabEntry],
    settings: NotifierSettings,
    argv: Iterable[str],
    *,
    run_state: Optional[RunState] = None,
) -> int:
    """Run a tray session, or fall back to the console if no tray exists."""
    run_state = run_state or RunState()
    app = QApplication.instance() or QApplication(list(argv))
    app.setQuitOnLastWindowClosed(False)

    if not QSystemTrayIcon.isSystemTrayAvailable():
        _LOGGER.warning("System tray not available; running in console mode.")
        run_headless(entries, settings, run_state=run_state)
        return 0

    coordinator = AppCoordinator(entries=entries, settings=settings, run_state=run_state)
    with interrupt_stops(run_state):
        coordinator.start()
        return app.exec()
