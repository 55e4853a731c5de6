"""
Exceptions raised by the engine.

Only precondition violations are raised. Recoverable input problems
(unknown word, colours matching nothing) are reported on Session.error.
"""


class WordleError(Exception):
    """Base class for engine errors."""


class PatternLengthError(WordleError, ValueError):
    """Guess and target (or a pattern) don't have matching lengths."""


class InvalidPatternError(WordleError, ValueError):
    """A textual pattern contains something other than G, Y or -."""


class DictionaryError(WordleError, ValueError):
    """Word lists are empty or inconsistent, or a word isn't an answer."""


class GameOverError(WordleError, RuntimeError):
    """A guess was submitted to a session that already finished."""
