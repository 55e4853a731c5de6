"""
Game session state machine.

    PLAYING --guess--> PLAYING | WON | LOST      (WON/LOST are terminal)

Sessions are immutable values: every operation returns a new Session and the
caller decides what to keep, so nothing here needs locking or re-render hooks.

Two flavours:
  - new_game():       a hidden secret is drawn; guess() scores against it.
  - new_cheat_game(): no secret; cheat_guess() takes the colors a game played
                      elsewhere showed, and only accepts them if at least one
                      remaining answer agrees.

Bad input (unknown word, impossible colors) is recoverable and lands in
Session.error; guessing on a finished game is a caller bug and raises.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence, Tuple

from wordle_analyzer.config import MAX_TURNS
from wordle_analyzer.datasets import Dictionary, default_dictionary
from wordle_analyzer.engine import (Color, Pattern, analyze_cheat, calculate_pattern, is_win,
                                    parse_pattern, pattern_to_str, prune_answers, validate_guess)
from wordle_analyzer.errors import DictionaryError, GameOverError

logger = logging.getLogger(__name__)

NO_MATCH_ERROR = "No remaining word matches guess+colors"


class GameState(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GuessRecord:
    word: str
    pattern: Pattern

    def __str__(self) -> str:
        return f"{self.word.upper()}  {pattern_to_str(self.pattern)}"


@dataclass(frozen=True)
class Session:
    secret: Optional[str] = field(repr=False)   # None when the colors come from outside
    guesses: Tuple[GuessRecord, ...] = ()
    remaining: Tuple[str, ...] = ()
    state: GameState = GameState.PLAYING
    error: Optional[str] = None

    @property
    def turn(self) -> int:
        """Number of accepted guesses so far."""
        return len(self.guesses)

    @property
    def is_over(self) -> bool:
        return self.state is not GameState.PLAYING

    @property
    def is_cheat(self) -> bool:
        return self.secret is None

    @property
    def revealed_answer(self) -> Optional[str]:
        """The secret, but only once the game has ended."""
        return self.secret if self.is_over else None


def new_game(dictionary: Optional[Dictionary] = None, *, rng: Optional[random.Random] = None,
             secret: Optional[str] = None) -> Session:
    """
    Start a game with a secret drawn uniformly from the answers (or the given one).

    Raises:
      DictionaryError if `secret` is given but isn't one of the answers.
    """
    dictionary = dictionary or default_dictionary()
    if secret is None:
        secret = (rng or random).choice(dictionary.answers)
    else:
        secret = secret.strip().lower()
        if secret not in dictionary.answers:
            raise DictionaryError(f"{secret!r} is not one of the possible answers")

    logger.info("New game started (%d possible answers)", len(dictionary.answers))
    return Session(secret=secret, remaining=dictionary.answers)


def new_cheat_game(dictionary: Optional[Dictionary] = None) -> Session:
    """Start a session for analyzing a game whose secret we can't see."""
    dictionary = dictionary or default_dictionary()
    logger.info("New cheat session started (%d possible answers)", len(dictionary.answers))
    return Session(secret=None, remaining=dictionary.answers)


def clear_error(session: Session) -> Session:
    """Drop the transient error (callers do this after ERROR_DISPLAY_SECONDS)."""
    return replace(session, error=None) if session.error else session


def _require_playing(session: Session, word: str) -> None:
    if session.is_over:
        logger.error("Guess %r submitted to a finished game (%s)", word, session.state.value)
        raise GameOverError(f"Game is already over ({session.state.value})")


def _advance(session: Session, word: str, pattern: Pattern, remaining: Sequence[str]) -> Session:
    guesses = session.guesses + (GuessRecord(word, pattern),)
    if is_win(pattern):
        state = GameState.WON
    elif len(guesses) >= MAX_TURNS:
        state = GameState.LOST
    else:
        state = GameState.PLAYING

    if state is GameState.WON:
        logger.info("Game won in %d guess(es) with %r", len(guesses), word)
    elif state is GameState.LOST:
        logger.info("Game lost after %d guesses; the answer was %r", len(guesses), session.secret or "unknown")

    return replace(session, guesses=guesses, remaining=tuple(remaining), state=state, error=None)


def guess(session: Session, word: str, dictionary: Optional[Dictionary] = None) -> Session:
    """
    Submit `word` against the hidden secret.

    Returns the advanced session, or the same session with `error` set if the
    word isn't acceptable.

    Raises:
      GameOverError if the session already ended.
      ValueError on a cheat session (use cheat_guess()).
    """
    dictionary = dictionary or default_dictionary()
    _require_playing(session, word)
    if session.is_cheat:
        raise ValueError("Cheat sessions have no secret; submit colors with cheat_guess()")

    ok, msg = validate_guess(word, dictionary.vocabulary, dictionary.word_length)
    if not ok:
        logger.debug("Rejected guess %r: %s", word, msg)
        return replace(session, error=msg)

    word = word.strip().lower()
    pattern = calculate_pattern(word, session.secret)
    remaining = prune_answers(session.remaining, word, pattern)
    return _advance(session, word, pattern, remaining)


def cheat_guess(session: Session, word: str, colors: str | Sequence[Color],
                dictionary: Optional[Dictionary] = None) -> Session:
    """
    Record `word` with externally observed `colors` ("GY--G" or a Pattern).

    The guess is only accepted if some remaining answer would have produced
    those colors; otherwise the session comes back unchanged with
    NO_MATCH_ERROR.

    Raises:
      GameOverError if the session already ended.
      ValueError on a session with a secret (use guess()).
    """
    dictionary = dictionary or default_dictionary()
    _require_playing(session, word)
    if not session.is_cheat:
        raise ValueError("Sessions with a secret are scored by guess(); cheat_guess() is for cheat sessions")

    ok, msg = validate_guess(word, dictionary.vocabulary, dictionary.word_length)
    if not ok:
        return replace(session, error=msg)

    try:
        pattern = parse_pattern(colors, dictionary.word_length)
    except ValueError:
        return replace(session, error=f"Colors must be {dictionary.word_length} of G, Y, -")

    word = word.strip().lower()
    matches = analyze_cheat(word, pattern, session.remaining)
    if not matches:
        logger.debug("Rejected %r %s: no remaining answer matches", word, pattern_to_str(pattern))
        return replace(session, error=NO_MATCH_ERROR)
    return _advance(session, word, pattern, matches)
