"""
Vocabulary data model shared by the runtime and the loader.
"""

from .vocab_entry import NotificationPayload, VocabEntry, VocabEntryError, render_notification  # noqa: F401
from .vocab_schema import parse_vocab_line, parse_vocab_text  # noqa: F401
