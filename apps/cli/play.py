"""
Play (or analyze) a game in the terminal.

Modes:
  hints     review each guess before it is submitted (default)
  no-hints  normal play
  cheat     you play somewhere else; type each guess and the colors you got
            back ("crane G-Y--") and get hints for the next one

Commands at the prompt:  ?  top guesses   new  start over   quit  exit

Usage:
    python -m apps.cli.play --mode cheat
"""

from __future__ import annotations

import argparse
import random
import time
from typing import Callable, List, Optional

from wordle_analyzer.analysis import get_ranker_ids, top_guesses
from wordle_analyzer.config import DEFAULT_STRATEGY, ERROR_DISPLAY_SECONDS, MAX_TURNS, WORD_LENGTH
from wordle_analyzer.datasets import Dictionary, default_dictionary, load_dictionary
from wordle_analyzer.engine import Color
from wordle_analyzer.log import configure_logging
from wordle_analyzer.session import (GameState, PlayMode, Session, cheat_guess, clear_error, guess,
                                     hint_for, keyboard_colors, new_cheat_game, new_game)

MODES = {"hints": PlayMode.HINTS, "no-hints": PlayMode.NO_HINTS, "cheat": PlayMode.CHEAT}
ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def render_board(session: Session) -> List[str]:
    """Guessed rows, then empty rows up to the turn budget."""
    rows = [str(r) for r in session.guesses]
    empty = Color.EMPTY.value * WORD_LENGTH
    rows += [f"{'.' * WORD_LENGTH}  {empty}"] * (MAX_TURNS - len(rows))
    return rows


def render_keyboard(session: Session) -> str:
    """Letters annotated with their best color; unguessed letters are bare."""
    colors = keyboard_colors(session.guesses)
    return " ".join(ch.upper() + (colors[ch].value if ch in colors else "") for ch in ALPHABET)


def describe_hint(word: str, session: Session, dictionary: Dictionary) -> List[str]:
    h = hint_for(word, session.remaining, dictionary)
    if not h.valid:
        return [f"{word} is not a valid guess. Try again."]
    if h.one_remaining:
        if h.is_solution:
            return ["There is only one remaining answer, and that's it!"]
        return [f"There is only one remaining answer, and {word} isn't it."]

    lines = [f"{word} {'is' if h.possible_answer else 'is not'} one of the remaining "
             f"{h.remaining_count} possible answers."]
    a = h.analysis
    if h.informative:
        lines.append(f"On average it leaves {a.expected_remaining} answers, splitting them into "
                     f"{a.bucket_count} color buckets (largest: {a.largest_bucket}).")
    else:
        lines.append("It won't eliminate any of the remaining answers; try something else.")
    return lines


def describe_top(session: Session, dictionary: Dictionary, strategy: str) -> List[str]:
    ranked = top_guesses(session.remaining, dictionary, strategy=strategy)
    return ["Top guesses by expected remaining answers:"] + [
        f"  {w.upper()}  {er:.2f}" for w, er in ranked]


def play(mode: PlayMode, dictionary: Dictionary, *, strategy: str = DEFAULT_STRATEGY,
         rng: Optional[random.Random] = None,
         input_fn: Callable[[str], str] = input, out: Callable[[str], None] = print,
         pause: Callable[[float], None] = time.sleep) -> Session:
    """
    Run the prompt loop until the player quits or input runs out.
    Errors stay on screen for ERROR_DISPLAY_SECONDS (via `pause`) before the
    session is cleared. Returns the last session.
    """
    def fresh() -> Session:
        return new_cheat_game(dictionary) if mode is PlayMode.CHEAT else new_game(dictionary, rng=rng)

    session = fresh()
    while True:
        for row in render_board(session):
            out(row)
        out(render_keyboard(session))

        if session.state is GameState.WON:
            out("You won!")
        elif session.state is GameState.LOST:
            out(f"You lost. The word was {(session.revealed_answer or '?').upper()}")

        prompt = "guess colors> " if mode is PlayMode.CHEAT else "guess> "
        try:
            line = input_fn(prompt).strip().lower()
        except EOFError:
            return session

        if line in ("quit", "exit"):
            return session
        if line == "new":
            session = fresh()
            continue
        if line == "?":
            for msg in describe_top(session, dictionary, strategy):
                out(msg)
            continue
        if session.is_over:
            out("Game over. Type 'new' or 'quit'.")
            continue

        if mode is PlayMode.CHEAT:
            parts = line.split()
            if len(parts) != 2:
                out("Enter the guess and its colors, e.g. crane G-Y--")
                continue
            session = cheat_guess(session, parts[0], parts[1], dictionary)
        else:
            if mode is PlayMode.HINTS:
                for msg in describe_hint(line, session, dictionary):
                    out(msg)
                if not dictionary.is_valid(line):
                    continue
                if input_fn(f"Submit {line}? [Y/n] ").strip().lower() in ("n", "no"):
                    continue
            session = guess(session, line, dictionary)

        if session.error:
            out(session.error)
            pause(ERROR_DISPLAY_SECONDS)
            session = clear_error(session)
        elif mode is PlayMode.CHEAT and not session.is_over:
            out(f"{len(session.remaining)} possible answers remain.")


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="wordle_analyzer: play or analyze a game")
    ap.add_argument("--mode", choices=sorted(MODES), default="hints")
    ap.add_argument("--strategy", default=DEFAULT_STRATEGY, choices=get_ranker_ids(),
                    help="ranking strategy for '?' suggestions")
    ap.add_argument("--answers", help="custom answers list (default: bundled)")
    ap.add_argument("--allowed", help="custom allowed-guesses list (default: bundled)")
    ap.add_argument("--seed", type=int, help="seed the secret word choice")
    ap.add_argument("--log-level", default="WARNING")
    ap.add_argument("--log-file", help="also write INFO+ logs to this file")
    args = ap.parse_args(argv)

    configure_logging(args.log_level, args.log_file)
    if args.answers or args.allowed:
        dictionary = load_dictionary(args.answers, args.allowed)
    else:
        dictionary = default_dictionary()

    play(MODES[args.mode], dictionary, strategy=args.strategy, rng=random.Random(args.seed))


if __name__ == "__main__":
    main()
