"""One-word-per-line list files, the format of everything under data/."""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_words(p: Path | str) -> List[str]:
    """
    Words from `p`, stripped and lowercased; blank lines are skipped.
    Raises FileNotFoundError for a missing file.
    """
    p = Path(p)
    if not p.is_file():
        raise FileNotFoundError(p)
    with p.open(encoding="utf-8") as f:
        return [w for w in (line.strip().lower() for line in f) if w]


def write_words(words: Iterable[str], p: Path | str) -> str:
    """Write one word per line (creating parent dirs) and return the path."""
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        f.writelines(f"{w}\n" for w in words)
    return str(p)
