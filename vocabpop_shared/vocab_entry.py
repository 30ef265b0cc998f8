"""
Shared representation of a single vocabulary item and its notification rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

MEANING_SEPARATOR = " — "


class VocabEntryError(ValueError):
    """Raised when an entry is constructed without a usable word."""


class NotificationPayload(NamedTuple):
    title: str
    body: str


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True, slots=True)
class VocabEntry:
    """
    One vocabulary item. ``word`` is the notification title; the remaining
    fields feed the body and are ``None`` when absent, never empty strings.
    """

    word: str
    reading: Optional[str] = None
    meaning: Optional[str] = None
    codes: Optional[str] = None

    def __post_init__(self) -> None:
        word = self.word.strip() if isinstance(self.word, str) else ""
        if not word:
            raise VocabEntryError("Vocabulary entry requires a non-empty word.")
        object.__setattr__(self, "word", word)
        object.__setattr__(self, "reading", _clean_optional(self.reading))
        object.__setattr__(self, "meaning", _clean_optional(self.meaning))
        object.__setattr__(self, "codes", _clean_optional(self.codes))

    @property
    def title(self) -> str:
        return self.word

    def render_body(self) -> str:
        body = ""
        if self.reading:
            body += self.reading
        if self.meaning:
            if body:
                body += MEANING_SEPARATOR
            body += self.meaning
        if self.codes:
            body += f" ({self.codes})"
        return body


def render_notification(entry: VocabEntry) -> NotificationPayload:
    """Render an entry into the title/body pair handed to a notification sink."""
    return NotificationPayload(title=entry.title, body=entry.render_body())
