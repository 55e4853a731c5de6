import random

from apps.cli.play import describe_hint, play, render_board, render_keyboard
from wordle_analyzer.config import ERROR_DISPLAY_SECONDS
from wordle_analyzer.datasets import Dictionary
from wordle_analyzer.session import GameState, PlayMode, guess, new_game

CR = ["crane", "crank", "crave", "cramp", "crazy"]


def _feed(lines):
    it = iter(lines)
    return lambda prompt="": next(it)


def test_cheat_mode_narrows_then_wins():
    d = Dictionary.from_lists(CR, ["venom"])
    out = []
    s = play(PlayMode.CHEAT, d, input_fn=_feed(["crane GGG--", "cramp GGGGG", "quit"]), out=out.append)
    assert s.state is GameState.WON
    assert "2 possible answers remain." in out
    assert "You won!" in out


def test_cheat_mode_reports_impossible_colors():
    d = Dictionary.from_lists(CR, ["venom"])
    out, waits = [], []
    s = play(PlayMode.CHEAT, d, input_fn=_feed(["crane -----", "crane", "quit"]), out=out.append,
             pause=waits.append)
    assert s.turn == 0
    assert s.error is None
    assert waits == [ERROR_DISPLAY_SECONDS]
    assert "No remaining word matches guess+colors" in out
    assert any(line.startswith("Enter the guess and its colors") for line in out)


def test_hints_mode_confirms_before_submitting():
    d = Dictionary.from_lists(["crane"], ["slate"])
    out = []
    inputs = ["zzzzz", "slate", "n", "slate", "y", "crane", "", "quit"]
    s = play(PlayMode.HINTS, d, rng=random.Random(0), input_fn=_feed(inputs), out=out.append)
    assert s.state is GameState.WON
    assert [r.word for r in s.guesses] == ["slate", "crane"]
    assert "zzzzz is not a valid guess. Try again." in out
    assert "There is only one remaining answer, and that's it!" in out


def test_no_hints_mode_stops_on_eof():
    d = Dictionary.from_lists(CR, ["venom"])

    def eof(prompt=""):
        raise EOFError

    s = play(PlayMode.NO_HINTS, d, input_fn=eof, out=lambda msg: None)
    assert s.turn == 0


def test_question_mark_lists_top_guesses():
    d = Dictionary.from_lists(CR, ["venom"])
    out = []
    play(PlayMode.NO_HINTS, d, input_fn=_feed(["?", "quit"]), out=out.append)
    assert "Top guesses by expected remaining answers:" in out
    assert "  CRANE  1.20" in out


def test_render_board_and_keyboard():
    d = Dictionary.from_lists(CR, ["venom"])
    s = guess(new_game(d, secret="crazy"), "crane", d)
    rows = render_board(s)
    assert len(rows) == 6
    assert rows[0] == "CRANE  GGG--"
    assert rows[1] == ".....       "
    kb = render_keyboard(s)
    assert "CG" in kb and "E-" in kb and kb.endswith(" Y Z")


def test_describe_hint_for_non_candidate():
    d = Dictionary.from_lists(CR, ["venom", "boots"])
    s = new_game(d, secret="crane")
    lines = describe_hint("boots", s, d)
    assert lines[0] == "boots is not one of the remaining 5 possible answers."
    assert "won't eliminate" in lines[1]
