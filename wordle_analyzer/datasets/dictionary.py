"""
The static dictionary: answers plus the wider guess vocabulary.

Loaded once and never mutated, so a single instance is shared by every
session. The bundled lists live in datasets/data/ next to this module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import FrozenSet, Iterable, Sequence, Tuple

from wordle_analyzer.config import WORD_LENGTH
from wordle_analyzer.errors import DictionaryError
from .io import read_words
from .openers import OPENING_GUESSES

logger = logging.getLogger(__name__)

DATA_DIR = Path(str(files("wordle_analyzer.datasets") / "data"))
ANSWERS_PATH = DATA_DIR / f"answers_{WORD_LENGTH}.txt"
ALLOWED_PATH = DATA_DIR / f"allowed_{WORD_LENGTH}.txt"


@dataclass(frozen=True)
class Dictionary:
    answers: Tuple[str, ...]
    guesses: Tuple[str, ...]                     # full vocabulary, answers included, sorted
    openers: Tuple[Tuple[str, float], ...] = ()  # precomputed first-turn ranking, if known
    word_length: int = WORD_LENGTH
    _vocabulary: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_vocabulary", frozenset(self.guesses))

    @classmethod
    def from_lists(cls, answers: Iterable[str], guesses: Iterable[str] = (), *,
                   openers: Sequence[Tuple[str, float]] = (), N: int = WORD_LENGTH) -> "Dictionary":
        """
        Build a dictionary from raw lists. Answers keep their order (deduped);
        the vocabulary is answers ∪ guesses. Words of the wrong length are dropped.
        """
        seen = set()
        ans = []
        for w in answers:
            w = w.strip().lower()
            if len(w) == N and w.isalpha() and w not in seen:
                seen.add(w)
                ans.append(w)
        if not ans:
            raise DictionaryError(f"No {N}-letter answers given")

        vocab = set(ans)
        vocab.update(w.strip().lower() for w in guesses if len(w.strip()) == N and w.strip().isalpha())
        return cls(answers=tuple(ans), guesses=tuple(sorted(vocab)), openers=tuple(openers),
                   word_length=N)

    @property
    def vocabulary(self) -> FrozenSet[str]:
        return self._vocabulary

    def is_valid(self, word: str) -> bool:
        return word.strip().lower() in self._vocabulary


def load_dictionary(answers_path: str | Path | None = None, allowed_path: str | Path | None = None,
                    *, openers: Sequence[Tuple[str, float]] | None = None,
                    N: int = WORD_LENGTH) -> Dictionary:
    """
    Load the answers and allowed lists from disk.

    Defaults to the bundled lists, which also get the bundled opening table;
    custom lists get no opening table unless one is passed in.

    Raises:
      FileNotFoundError if a path is missing, DictionaryError if the answers
      list is empty or contains words the allowed list doesn't.
    """
    bundled = answers_path is None and allowed_path is None
    answers = read_words(answers_path or ANSWERS_PATH)
    allowed = read_words(allowed_path or ALLOWED_PATH)

    missing = set(answers) - set(allowed)
    if missing:
        raise DictionaryError(f"answers not subset of allowed (e.g., {sorted(missing)[:5]})")

    if openers is None:
        openers = OPENING_GUESSES if bundled else ()
    d = Dictionary.from_lists(answers, allowed, openers=openers, N=N)
    logger.info("Loaded dictionary: %d answers, %d guessable words", len(d.answers), len(d.guesses))
    return d


@lru_cache(maxsize=1)
def default_dictionary() -> Dictionary:
    """The bundled dictionary, loaded on first use."""
    return load_dictionary()
