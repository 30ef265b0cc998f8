import os
import tempfile
from pathlib import Path

import pytest

# Keep the rotating file sink out of the user's home directory.
os.environ.setdefault("VOCABPOP_LOG_DIR", tempfile.mkdtemp(prefix="vocabpop-logs-"))
# Qt widgets run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from loguru import logger  # noqa: E402

from vocabpop import logger as app_logger  # noqa: E402

from vocabpop_core.run_state import RunState  # noqa: E402
from vocabpop_core.signal_channel import ShowNowChannel  # noqa: E402
from vocabpop_shared.vocab_entry import VocabEntry  # noqa: E402


class RecordingSink:
    """Notification sink that remembers every title/body pair it was given."""

    def __init__(self):
        self.shown = []
        self.on_show = None

    def show(self, title, body):
        self.shown.append((title, body))
        if self.on_show is not None:
            self.on_show(len(self.shown))


class FakeSleep:
    """Stand-in for time.sleep that records ticks and runs a hook per tick."""

    def __init__(self):
        self.calls = []
        self.on_tick = None

    def __call__(self, seconds):
        self.calls.append(seconds)
        if self.on_tick is not None:
            self.on_tick(len(self.calls))


@pytest.fixture
def run_state():
    return RunState()


@pytest.fixture
def channel():
    return ShowNowChannel()


@pytest.fixture
def sample_entries():
    return [
        VocabEntry(word="日", reading="hi"),
        VocabEntry(word="猫", reading="neko", meaning="cat", codes="N5"),
    ]


@pytest.fixture
def vocab_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "vocab"
    directory.mkdir()
    return directory


@pytest.fixture
def log_messages():
    app_logger.configure()
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def fake_sleep():
    return FakeSleep()


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
