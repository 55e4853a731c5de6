"""
Candidate filtering given observed feedback.

A candidate answer survives a (guess, pattern) observation iff scoring the
guess against that candidate reproduces the observed pattern exactly. This
never looks at the real secret, only at the pattern that was seen.

This is the step that turns feedback into a shrinking candidate set; the
result is always a subset of the input, in the input's order.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from .scoring import Color, Pattern, calculate_pattern, parse_pattern

logger = logging.getLogger(__name__)

# History is a sequence of (guess, pattern) pairs, oldest first.
History = Iterable[Tuple[str, Pattern]]


def _matching(candidates: Iterable[str], guess: str, pattern: Pattern) -> List[str]:
    guess = guess.strip().lower()
    return [a for a in candidates if calculate_pattern(guess, a) == pattern]


def prune_answers(candidates: Sequence[str], guess: str, pattern: Sequence[Color]) -> List[str]:
    """
    Keep only candidates that would have produced `pattern` for `guess`.

    An empty `candidates` means an earlier step went wrong; it's logged and
    handed back unchanged.
    """
    if not candidates:
        logger.warning("No remaining answers to prune for guess %r - this shouldn't happen", guess)
        return list(candidates)
    return _matching(candidates, guess, tuple(pattern))


def analyze_cheat(word: str, colors: str | Sequence[Color], candidates: Iterable[str]) -> List[str]:
    """
    Filter `candidates` by externally supplied colors (e.g. from a game played
    elsewhere). An empty result means no candidate is consistent with them.
    """
    return _matching(candidates, word, parse_pattern(colors))


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """Keep words consistent with every (guess, pattern) in `history`."""
    out = list(words)
    for g, patt in history:
        out = _matching(out, g, tuple(patt))
    return out
