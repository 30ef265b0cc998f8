"""
Core runtime for VocabPop: rotation, signalling and notification delivery.
"""

from .rotation_scheduler import EmptyVocabularyError, RotationScheduler, SchedulerState, build_sequence  # noqa: F401
from .run_state import RunState  # noqa: F401
from .signal_channel import ShowNowChannel  # noqa: F401
