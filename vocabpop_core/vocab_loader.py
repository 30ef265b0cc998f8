"""
Vocabulary discovery for the VocabPop runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from vocabpop_shared.vocab_entry import VocabEntry
from vocabpop_shared.vocab_schema import parse_vocab_text


@dataclass(slots=True)
class LoadResult:
    entries: List[VocabEntry]
    errors: List[Tuple[Path, Exception]]


def scan_vocab_directory(vocab_dir: Path) -> LoadResult:
    """
    Parse every regular file directly inside ``vocab_dir`` in name order.

    Files that cannot be read or decoded are reported in ``errors`` and
    contribute nothing; a missing directory yields an empty result.
    """
    entries: List[VocabEntry] = []
    errors: List[Tuple[Path, Exception]] = []

    try:
        files = [p for p in Path(vocab_dir).iterdir() if p.is_file()]
    except OSError:
        return LoadResult(entries=[], errors=[])

    for file_path in sorted(files):
        try:
            text = file_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            errors.append((file_path, exc))
            continue
        entries.extend(parse_vocab_text(text))

    return LoadResult(entries=entries, errors=errors)
