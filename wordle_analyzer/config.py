"""
Game configuration constants.

Everything that shapes a game lives here so callers (CLI, harness, tests)
read the same numbers. Values are Final: change them here, not at runtime.
"""

from typing import Final

# Fixed word length for answers and guesses
WORD_LENGTH: Final[int] = 5

# Wordle turn budget; the 6th non-winning guess loses the game
MAX_TURNS: Final[int] = 6

# How many ranked guesses top_guesses() returns by default
TOP_N: Final[int] = 20

# How long a caller should show a transient session error before clear_error()
ERROR_DISPLAY_SECONDS: Final[float] = 2.0

# Ranking strategy used when the caller doesn't ask for one
DEFAULT_STRATEGY: Final[str] = "candidates"
