"""
Self-play harness.

- run_case:  play one game against a known answer, always submitting the
             top-ranked guess for the current candidate set.
- run_batch: run many answers back to back (optionally a sample prefix).

Games go through the public session API, so the harness exercises exactly
what a UI would. The 6-turn limit comes from the session itself.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List

from wordle_analyzer.analysis import top_guesses
from wordle_analyzer.config import DEFAULT_STRATEGY, MAX_TURNS
from wordle_analyzer.datasets import Dictionary
from wordle_analyzer.engine import pattern_to_str
from wordle_analyzer.session import GameState, guess, new_game

logger = logging.getLogger(__name__)


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: the session enforces MAX_TURNS, so other budgets can't be honoured."""
    if max_turns != MAX_TURNS:
        raise ValueError(f"max_turns must be {MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        answer: str,
        *,
        dictionary: Dictionary,
        strategy: str = DEFAULT_STRATEGY,
        max_turns: int = MAX_TURNS,
) -> Dict:
    """
    Play one game until it's won or the turn budget runs out.

    Returns:
        dict with keys:
            answer, strategy, success (bool), guesses (int), time_ms (float),
            history (list[(word, pattern_str)]), remaining (list[int], candidate
            count after each guess)
    """
    _assert_wordle_turns(max_turns)

    session = new_game(dictionary, secret=answer)
    remaining: List[int] = []

    t0 = time.perf_counter()
    while session.state is GameState.PLAYING:
        ranked = top_guesses(session.remaining, dictionary, limit=1, strategy=strategy)
        session = guess(session, ranked[0][0], dictionary)
        remaining.append(len(session.remaining))
    dt = (time.perf_counter() - t0) * 1000.0

    logger.debug("%s: %s in %d", answer, session.state.value, session.turn)
    return {
        "answer": session.secret,
        "strategy": strategy,
        "success": session.state is GameState.WON,
        "guesses": session.turn,
        "time_ms": dt,
        "history": [(r.word, pattern_to_str(r.pattern)) for r in session.guesses],
        "remaining": remaining,
    }


def run_batch(
        answers: Iterable[str],
        *,
        dictionary: Dictionary,
        strategy: str = DEFAULT_STRATEGY,
        max_turns: int = MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases. If `sample` is given, only the first K answers are played.
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]
    return [run_case(ans, dictionary=dictionary, strategy=strategy) for ans in pool]
