"""
Player-facing hints built on the analyzer.

hint_for() answers "is this a good guess right now?" before it's submitted;
keyboard_colors() gives the best color seen so far for each letter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional

from wordle_analyzer.analysis import GuessAnalysis, analyze
from wordle_analyzer.datasets import Dictionary, default_dictionary
from wordle_analyzer.engine import Color
from .game import GuessRecord


class PlayMode(str, Enum):
    NO_HINTS = "No Hints"   # normal play
    HINTS = "Hints"         # review each guess before submitting it
    CHEAT = "Cheat"         # colors come from a game played elsewhere


# Higher wins when a letter has been seen with several colors
_RANK = {Color.GREY: 0, Color.YELLOW: 1, Color.GREEN: 2}


@dataclass(frozen=True)
class GuessHint:
    word: str
    valid: bool
    possible_answer: bool
    remaining_count: int
    analysis: Optional[GuessAnalysis]

    @property
    def one_remaining(self) -> bool:
        return self.remaining_count == 1

    @property
    def is_solution(self) -> bool:
        return self.one_remaining and self.possible_answer

    @property
    def informative(self) -> bool:
        return self.analysis is not None and self.analysis.informative


def hint_for(word: str, remaining: Iterable[str], dictionary: Optional[Dictionary] = None) -> GuessHint:
    dictionary = dictionary or default_dictionary()
    word = word.strip().lower()
    remaining = list(remaining)
    valid = dictionary.is_valid(word)
    return GuessHint(
        word=word,
        valid=valid,
        possible_answer=word in remaining,
        remaining_count=len(remaining),
        analysis=analyze(word, remaining) if valid else None,
    )


def keyboard_colors(records: Iterable[GuessRecord]) -> Dict[str, Color]:
    """Letter -> best color it has received; unguessed letters are absent."""
    best: Dict[str, Color] = {}
    for rec in records:
        for letter, color in zip(rec.word, rec.pattern):
            if letter not in best or _RANK[color] > _RANK[best[letter]]:
                best[letter] = color
    return best
