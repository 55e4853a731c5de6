from script.compute_openers import rank_openers
from wordle_analyzer.analysis import top_guesses
from wordle_analyzer.datasets import Dictionary

CR = ["crane", "crank", "crave", "cramp", "crazy"]
DICT = Dictionary.from_lists(CR, ["venom"])


def test_rank_openers_defaults_to_candidates_ranking():
    ranked = rank_openers(DICT)
    assert ranked == [
        ("crane", 1.2), ("crank", 2.0), ("crave", 2.0), ("cramp", 3.2), ("crazy", 3.2),
    ]
    assert [w for w, _ in ranked] == [w for w, _ in top_guesses(CR, DICT)]


def test_rank_openers_vocabulary_pool():
    ranked = rank_openers(DICT, vocabulary=True, top=2)
    assert ranked == [("venom", 1.0), ("crane", 1.2)]
