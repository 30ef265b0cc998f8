"""Tests for the tray coordinator, the tray fallback and interrupt handling."""

import signal
import threading
import time
from unittest.mock import MagicMock

import pytest

from vocabpop_core import app as app_module
from vocabpop_core.app import FORCE_LINGER_MS, AppCoordinator, interrupt_stops, run_tray_app
from vocabpop_core.rotation_scheduler import SchedulerState
from vocabpop_core.settings import NotifierSettings


def wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def coordinator(qapp, sample_entries, channel, run_state):
    coord = AppCoordinator(
        entries=sample_entries,
        settings=NotifierSettings(interval_minutes=1),
        channel=channel,
        run_state=run_state,
    )
    yield coord
    run_state.stop()


class TestInterruptStops:
    def test_sigint_stops_run_state_and_handler_restored(self, run_state):
        previous = signal.getsignal(signal.SIGINT)

        with interrupt_stops(run_state):
            signal.raise_signal(signal.SIGINT)

        assert run_state.is_running is False
        assert signal.getsignal(signal.SIGINT) is previous

    def test_off_main_thread_leaves_handler_alone(self, run_state):
        previous = signal.getsignal(signal.SIGINT)
        seen = []

        def worker():
            with interrupt_stops(run_state):
                seen.append(signal.getsignal(signal.SIGINT))

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [previous]
        assert run_state.is_running is True


class TestAppCoordinator:
    def test_show_now_action_sends_signal(self, coordinator, channel):
        coordinator._show_now_action.trigger()
        assert channel.try_receive() is True

    def test_quit_action_stops_run_state(self, coordinator, run_state):
        coordinator._quit_action.trigger()
        assert run_state.is_running is False

    def test_watch_timer_waits_while_scheduler_alive(self, coordinator, run_state):
        coordinator._thread = MagicMock()
        coordinator._thread.is_alive.return_value = True

        coordinator._on_watch_timer()

        assert run_state.is_running is True

    def test_watch_timer_shuts_down_after_scheduler_exits(self, coordinator, run_state):
        coordinator._on_watch_timer()

        assert run_state.is_running is False
        assert coordinator._watch_timer.isActive() is False

    def test_force_mode_lingers_once_before_shutdown(self, qapp, sample_entries, run_state, monkeypatch):
        coord = AppCoordinator(
            entries=sample_entries,
            settings=NotifierSettings(force=True),
            run_state=run_state,
        )
        timer = MagicMock()
        monkeypatch.setattr(app_module, "QTimer", timer)

        coord._on_watch_timer()
        coord._on_watch_timer()

        timer.singleShot.assert_called_once_with(FORCE_LINGER_MS, coord.shutdown)
        assert run_state.is_running is True

    def test_start_then_quit_ends_scheduler_thread(self, coordinator):
        coordinator.start()
        assert wait_until(lambda: coordinator.scheduler.shown_count >= 1)

        coordinator._quit_action.trigger()
        assert wait_until(lambda: coordinator.scheduler.state is SchedulerState.STOPPED)
        coordinator._on_watch_timer()

        assert coordinator._thread.is_alive() is False


def test_run_tray_app_falls_back_to_console_without_tray(qapp, sample_entries, run_state, monkeypatch):
    tray_class = MagicMock()
    tray_class.isSystemTrayAvailable.return_value = False
    monkeypatch.setattr(app_module, "QSystemTrayIcon", tray_class)
    calls = []
    monkeypatch.setattr(
        app_module,
        "run_headless",
        lambda entries, settings, run_state: calls.append((entries, settings, run_state)),
    )
    settings = NotifierSettings()

    exit_code = run_tray_app(sample_entries, settings, ["vocabpop"], run_state=run_state)

    assert exit_code == 0
    assert calls == [(sample_entries, settings, run_state)]
