"""
Line-oriented vocabulary file format.

Each non-blank, non-comment line holds up to four tab-separated fields::

    word<TAB>reading<TAB>meaning<TAB>codes

Missing trailing fields are absent. Lines whose first non-whitespace
character is ``#`` are comments. Lines without a word are skipped rather
than rejected so a partially broken file still contributes its good lines.
"""

from __future__ import annotations

from typing import List, Optional

from .vocab_entry import VocabEntry

FIELD_SEPARATOR = "\t"
COMMENT_PREFIX = "#"
_FIELD_COUNT = 4


def parse_vocab_line(line: str) -> Optional[VocabEntry]:
    """Parse one line, returning ``None`` for blanks, comments and word-less lines."""
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    parts = stripped.split(FIELD_SEPARATOR)[:_FIELD_COUNT]
    parts += [""] * (_FIELD_COUNT - len(parts))
    word, reading, meaning, codes = (part.strip() for part in parts)
    if not word:
        return None

    return VocabEntry(word=word, reading=reading, meaning=meaning, codes=codes)


def parse_vocab_text(text: str) -> List[VocabEntry]:
    entries: List[VocabEntry] = []
    for line in text.splitlines():
        entry = parse_vocab_line(line)
        if entry is not None:
            entries.append(entry)
    return entries
