import csv
import json
import re

import pytest
from wordle_analyzer.datasets import Dictionary, default_dictionary
from wordle_analyzer.harness import run_batch, run_case, write_csv, write_manifest
from wordle_analyzer.harness.io import git_commit_or_unknown, timestamp_id

DICT = Dictionary.from_lists(["crane", "crank", "crave", "cramp", "crazy", "slate", "oasis"],
                             ["venom", "boots"])


def test_run_case_smoke():
    r = run_case("oasis", dictionary=DICT)
    assert r["success"] is True
    assert r["guesses"] <= 6
    assert r["history"][-1] == ("oasis", "GGGGG")
    assert len(r["remaining"]) == r["guesses"]


def test_run_case_vocabulary_strategy():
    r = run_case("crazy", dictionary=DICT, strategy="vocabulary")
    assert r["success"] is True
    assert r["strategy"] == "vocabulary"


def test_run_case_full_dictionary_opens_with_table():
    r = run_case("oasis", dictionary=default_dictionary())
    assert r["history"][0][0] == "raise"
    assert r["guesses"] <= 6


def test_run_case_enforces_turns():
    with pytest.raises(ValueError):
        run_case("crane", dictionary=DICT, max_turns=10)


def test_run_batch_and_reports(tmp_path):
    results = run_batch(DICT.answers, dictionary=DICT, sample=3)
    assert [r["answer"] for r in results] == ["crane", "crank", "crave"]

    path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert rows[0]["patt_1"].startswith("'")
    assert "left_6" in rows[0]

    mpath = write_manifest({"num_cases": 3}, str(tmp_path / "m.json"))
    assert json.loads(open(mpath, encoding="utf-8").read()) == {"num_cases": 3}


def test_run_id_and_commit_stamp():
    assert re.fullmatch(r"\d{8}T\d{6}Z", timestamp_id())
    commit = git_commit_or_unknown()
    assert isinstance(commit, str) and commit
