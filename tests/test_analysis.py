import logging

import numpy as np
import pytest
from wordle_analyzer.analysis import analyze, bucket_map, create_ranker, get_ranker_ids, top_guesses
from wordle_analyzer.analysis.table import bucket_counts, expected_remaining, pattern_matrix
from wordle_analyzer.datasets import OPENING_GUESSES, Dictionary, default_dictionary
from wordle_analyzer.engine import calculate_pattern, pattern_code

CR = ["crane", "crank", "crave", "cramp", "crazy"]
DICT = Dictionary.from_lists(CR + ["slate", "oasis"], ["venom", "boots", "fuzzy"])


def test_analyze_buckets():
    a = analyze("crave", CR)
    # GGG-G: crane | GGG--: crank, cramp, crazy | GGGGG: crave
    assert a.bucket_count == 3
    assert a.largest_bucket == 3
    assert a.expected_remaining == 2.0      # (1 + 9 + 1) / 5 - 1/5
    assert a.candidate_count == 5
    assert a.informative


def test_bucket_map_counts_sum_to_candidates():
    buckets = bucket_map("crane", CR)
    assert sum(buckets.values()) == len(CR)
    assert buckets[calculate_pattern("crane", "cramp")] == 2


def test_analyze_non_candidate_has_no_win_correction():
    # every candidate is distinguished, nobody can win outright
    assert analyze("venom", CR).expected_remaining == 1.0


def test_analyze_uninformative_guess():
    a = analyze("boots", CR)
    assert a.bucket_count == 1
    assert a.expected_remaining == 5.0
    assert not a.informative


@pytest.mark.parametrize("word", CR + ["slate", "oasis", "venom", "boots", "fuzzy"])
def test_expected_remaining_bounded(word):
    assert analyze(word, CR).expected_remaining <= len(CR)


def test_analyze_single_candidate():
    assert analyze("crane", ["crane"]).expected_remaining == 0.0
    assert not analyze("crank", ["crane"]).informative


def test_analyze_empty_warns(caplog):
    with caplog.at_level(logging.WARNING):
        a = analyze("crane", [])
    assert (a.expected_remaining, a.bucket_count, a.largest_bucket) == (0.0, 0, 0)
    assert "empty candidate set" in caplog.text


def test_top_guesses_candidates_only():
    assert top_guesses(CR, DICT) == [
        ("crane", 1.2), ("crank", 2.0), ("crave", 2.0), ("cramp", 3.2), ("crazy", 3.2),
    ]


def test_top_guesses_limit_and_order():
    ranked = top_guesses(DICT.answers[:6], DICT, limit=3)
    assert len(ranked) == 3
    values = [er for _, er in ranked]
    assert values == sorted(values)


def test_top_guesses_vocabulary_finds_better_split():
    ranked = top_guesses(CR, DICT, strategy="vocabulary")
    assert ranked[0] == ("venom", 1.0)
    assert ("crane", 1.2) in ranked
    assert len(ranked) == len(DICT.guesses)
    values = [er for _, er in ranked]
    assert values == sorted(values)


def test_top_guesses_opening_table():
    d = default_dictionary()
    ranked = top_guesses(d.answers, d)
    assert ranked == list(OPENING_GUESSES)
    assert len(ranked) == 20
    assert ranked[0] == ("raise", 60.7)
    assert [er for _, er in ranked] == sorted(er for _, er in ranked)
    assert all(d.is_valid(w) for w, _ in ranked)


def test_top_guesses_empty_and_unknown_strategy():
    assert top_guesses([], DICT) == []
    with pytest.raises(ValueError):
        top_guesses(CR, DICT, strategy="nope")


def test_ranker_registry():
    assert get_ranker_ids() == ["candidates", "vocabulary"]
    assert create_ranker("candidates").id == "candidates"


def test_pattern_matrix_matches_scoring():
    m = pattern_matrix(["venom", "crane"], CR)
    assert m.shape == (2, 5)
    assert m.dtype == np.uint8
    for i, g in enumerate(["venom", "crane"]):
        for j, a in enumerate(CR):
            assert m[i, j] == pattern_code(calculate_pattern(g, a))


def test_bucket_counts_rows_sum_to_answers():
    counts = bucket_counts(pattern_matrix(CR, CR), 5)
    assert counts.shape == (5, 243)
    assert (counts.sum(axis=1) == 5).all()


def test_table_agrees_with_analyzer():
    pool = CR + ["venom", "boots"]
    table = expected_remaining(pool, CR)
    assert list(table) == [analyze(w, CR).expected_remaining for w in pool]


def test_top_guesses_default_limit_on_computed_ranking():
    d = default_dictionary()
    ranked = top_guesses(d.answers[:60], d)
    assert len(ranked) == 20
    values = [er for _, er in ranked]
    assert values == sorted(values)
    assert all(w in d.answers[:60] for w, _ in ranked)


def test_opening_table_used_by_every_strategy():
    d = default_dictionary()
    assert top_guesses(d.answers, d, strategy="vocabulary") == list(OPENING_GUESSES)


def test_opening_table_is_candidates_ranking():
    d = default_dictionary()
    for word, er in OPENING_GUESSES:
        assert word in d.answers
        assert analyze(word, d.answers).expected_remaining == pytest.approx(er, abs=0.051)
