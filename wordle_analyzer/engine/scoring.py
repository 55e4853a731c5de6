"""
Wordle-style feedback (pattern) for a single (guess, target) pair.

Colors:
  - GREEN  'G' : correct letter in the correct position
  - YELLOW 'Y' : correct letter in the wrong position
  - GREY   '-' : letter not present (or present fewer times than guessed)
  - EMPTY  ' ' : tile with nothing guessed yet; display-only, never produced here

Algorithm (two-pass, duplicate-safe):
  1) Mark greens and count them per letter. Letters that don't occur in the
     target at all are grey straight away; the rest are pending.
  2) A pending letter may receive  min(count in target, count in guess) - greens
     yellows, handed out left to right. Leftover positions are grey.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from wordle_analyzer.errors import InvalidPatternError, PatternLengthError


class Color(str, Enum):
    GREEN = "G"
    YELLOW = "Y"
    GREY = "-"
    EMPTY = " "


# One Color per letter position of the guess
Pattern = Tuple[Color, ...]

# Digit of each color in pattern_code(); EMPTY never appears in a computed pattern
_CODE_DIGIT: Dict[Color, int] = {Color.GREY: 0, Color.YELLOW: 1, Color.GREEN: 2}


def calculate_pattern(guess: str, target: str) -> Pattern:
    """
    Compute the color pattern `guess` produces against `target`.

    Raises:
      PatternLengthError if the two words differ in length.

    Examples:
      calculate_pattern("belle", "level") -> "-GYYY"
      calculate_pattern("abbey", "billy") -> "-Y--G"   (second 'b' stays grey)
    """
    guess = guess.strip().lower()
    target = target.strip().lower()
    if len(guess) != len(target):
        raise PatternLengthError(
            f"Guess and target must be the same length: {guess!r} vs {target!r}")

    colors: List[Optional[Color]] = [None] * len(guess)
    matched: Counter = Counter()
    pending = set()

    # Pass 1: greens, plain misses, and letters we can't decide yet
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            colors[i] = Color.GREEN
            matched[g] += 1
        elif g not in target:
            colors[i] = Color.GREY
        else:
            pending.add(g)

    # Yellow budget per pending letter, capped by the true multiplicity
    target_counts = Counter(target)
    guess_counts = Counter(guess)
    available = {
        ch: min(target_counts[ch], guess_counts[ch]) - matched[ch]
        for ch in pending
    }

    # Pass 2: spend the budget left to right
    for i, g in enumerate(guess):
        if colors[i] is not None:
            continue
        if available[g] > 0:
            colors[i] = Color.YELLOW
            available[g] -= 1
        else:
            colors[i] = Color.GREY

    return tuple(colors)  # type: ignore[arg-type]


def is_win(pattern: Iterable[Color]) -> bool:
    pattern = tuple(pattern)
    return bool(pattern) and all(c is Color.GREEN for c in pattern)


def pattern_to_str(pattern: Iterable[Color]) -> str:
    """Pattern -> compact text, e.g. (GREEN, GREY, ...) -> "G-..."."""
    return "".join(Color(c).value for c in pattern)


def parse_pattern(text: str | Iterable[Color], N: int | None = None) -> Pattern:
    """
    Accept a Pattern or its text form ("GY--G", case-insensitive) and return a Pattern.

    Only G, Y and - are accepted; EMPTY can't be typed in. If N is given the
    result must have exactly N colors.
    """
    if isinstance(text, str):
        try:
            colors = tuple(Color(ch) for ch in text.strip().upper())
        except ValueError as e:
            raise InvalidPatternError(f"Pattern {text!r} may only contain G, Y and -") from e
    else:
        colors = tuple(Color(c) for c in text)

    if Color.EMPTY in colors:
        raise InvalidPatternError("Pattern may not contain EMPTY tiles")
    if N is not None and len(colors) != N:
        raise PatternLengthError(f"Pattern must have {N} colors, got {len(colors)}")
    return colors


def pattern_code(pattern: Iterable[Color]) -> int:
    """Base-3 integer for a pattern (GREY=0, YELLOW=1, GREEN=2, first letter lowest)."""
    code = 0
    for i, c in enumerate(pattern):
        code += _CODE_DIGIT[Color(c)] * 3 ** i
    return code
