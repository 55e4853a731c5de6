"""
Guess validation.

A guess is acceptable iff it is exactly N letters, alphabetic, and in the
dictionary's vocabulary (answers plus extended guesses). Failures come back
as a short, user-facing message rather than an exception: they're
recoverable and the session simply shows them.
"""

from __future__ import annotations

from typing import Collection, Tuple

NOT_IN_WORD_LIST = "Not in word list"
NOT_LETTERS = "Guess must contain only letters"


def validate_guess(word: object, vocabulary: Collection[str], N: int) -> Tuple[bool, str]:
    """
    Returns:
      (True, "") for a valid guess, else (False, message).
    """
    if not isinstance(word, str):
        return False, NOT_LETTERS

    w = word.strip().lower()

    if len(w) < N:
        return False, "Not enough letters"
    if len(w) > N:
        return False, "Too many letters"
    if not w.isalpha():
        return False, NOT_LETTERS

    if w not in vocabulary:
        return False, NOT_IN_WORD_LIST
    return True, ""
