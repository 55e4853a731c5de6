"""
Precomputed opening guesses for the bundled answer list.

Ranking every answer against every other answer on the first turn costs
millions of pattern computations, and the result is always the same for a
fresh game, so it's stored here instead. Values are expected remaining answers
after the guess, best first, over the answers only (the "candidates" ranking).
Regenerate with `python -m script.compute_openers` (without --vocabulary).
"""

from typing import Final, Tuple

OPENING_GUESSES: Final[Tuple[Tuple[str, float], ...]] = (
    ("raise", 60.7),
    ("arise", 63.5),
    ("irate", 63.5),
    ("arose", 65.8),
    ("alter", 69.8),
    ("later", 70.0),
    ("saner", 70.0),
    ("snare", 71.0),
    ("stare", 71.0),
    ("slate", 71.3),
    ("alert", 71.5),
    ("crate", 72.8),
    ("trace", 73.9),
    ("stale", 75.3),
    ("aisle", 76.1),
    ("learn", 76.7),
    ("leant", 77.1),
    ("alone", 77.2),
    ("least", 78.0),
    ("crane", 78.7),
)
