from wordle_analyzer.datasets import Dictionary
from wordle_analyzer.engine import Color, calculate_pattern
from wordle_analyzer.session import GuessRecord, PlayMode, hint_for, keyboard_colors

CR = ["crane", "crank", "crave", "cramp", "crazy"]
DICT = Dictionary.from_lists(CR, ["venom", "boots"])


def test_hint_for_candidate():
    h = hint_for("CRAVE", CR, DICT)
    assert h.valid and h.possible_answer
    assert h.remaining_count == 5
    assert h.analysis.expected_remaining == 2.0
    assert h.informative
    assert not h.one_remaining


def test_hint_for_invalid_word():
    h = hint_for("zzzzz", CR, DICT)
    assert not h.valid
    assert h.analysis is None
    assert not h.informative


def test_hint_for_uninformative_word():
    h = hint_for("boots", CR, DICT)
    assert h.valid and not h.possible_answer
    assert not h.informative


def test_hint_one_remaining():
    assert hint_for("crane", ["crane"], DICT).is_solution
    h = hint_for("crank", ["crane"], DICT)
    assert h.one_remaining and not h.is_solution


def test_keyboard_colors_best_color_wins():
    records = [
        GuessRecord("abbey", calculate_pattern("abbey", "billy")),   # -Y--G
        GuessRecord("crane", calculate_pattern("crane", "crazy")),   # GGG--
    ]
    colors = keyboard_colors(records)
    assert colors["b"] is Color.YELLOW       # yellow beats the grey duplicate
    assert colors["y"] is Color.GREEN
    assert colors["a"] is Color.GREEN        # grey in abbey, green in crane
    assert colors["e"] is Color.GREY
    assert "z" not in colors


def test_play_modes():
    assert {m.value for m in PlayMode} == {"No Hints", "Hints", "Cheat"}
