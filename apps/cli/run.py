"""
CLI entry point for self-play benchmarks.

This script:
  1) Validates the word lists (prints counts + SHA, checks answers ⊆ allowed).
  2) Loads the dictionary and picks the answers to play (all, or a seeded sample).
  3) Plays each answer with the chosen ranking strategy, with a progress bar, and writes:
       - CSV:  per-game results + guess/pattern/remaining columns
       - JSON: manifest with config, word-list report, summary stats, git commit

Usage:
    python -m apps.cli.run --strategy candidates --sample 200 --seed 123
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordle_analyzer.analysis import get_ranker_ids
from wordle_analyzer.config import DEFAULT_STRATEGY, MAX_TURNS, WORD_LENGTH
from wordle_analyzer.datasets import (ALLOWED_PATH, ANSWERS_PATH, load_dictionary, pretty_summary,
                                      validate_wordlists)
from wordle_analyzer.harness import run_case, write_csv, write_manifest
from wordle_analyzer.harness.io import git_commit_or_unknown, timestamp_id
from wordle_analyzer.log import configure_logging


def _summary(results: list[dict]) -> dict:
    wins = [r["guesses"] for r in results if r["success"]]
    return {
        "games": len(results),
        "wins": len(wins),
        "win_rate": round(len(wins) / len(results), 4) if results else 0.0,
        "mean_guesses_when_won": round(sum(wins) / len(wins), 3) if wins else None,
        "distribution": {str(k): wins.count(k) for k in range(1, MAX_TURNS + 1)},
    }


def main():
    ap = argparse.ArgumentParser(description="wordle_analyzer: self-play benchmark")
    ap.add_argument("--strategy", default=DEFAULT_STRATEGY, choices=get_ranker_ids(),
                    help="ranking strategy used to pick each guess")
    ap.add_argument("--answers", default=str(ANSWERS_PATH), help="path to answers list")
    ap.add_argument("--allowed", default=str(ALLOWED_PATH),
                    help="path to allowed guesses (must be a superset of answers)")
    ap.add_argument("--sample", type=int, help="play only a seeded random subset of answers")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    ap.add_argument("--log-level", default="WARNING")
    ap.add_argument("--log-file", help="also write INFO+ logs to this file")
    args = ap.parse_args()

    configure_logging(args.log_level, args.log_file)

    # 1) Validate word lists
    rep = validate_wordlists(WORD_LENGTH, args.answers, args.allowed)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}", file=sys.stderr)

    # 2) Load; the bundled lists also bring the precomputed opening table
    bundled = args.answers == str(ANSWERS_PATH) and args.allowed == str(ALLOWED_PATH)
    dictionary = load_dictionary() if bundled else load_dictionary(args.answers, args.allowed)

    cases = list(dictionary.answers)
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        rng.shuffle(cases)
        cases = cases[: args.sample]

    # 3) Play
    results = []
    for ans in tqdm(cases, ncols=80, desc="Playing", unit="game", disable=args.no_progress):
        results.append(run_case(ans, dictionary=dictionary, strategy=args.strategy))

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=MAX_TURNS)
    summary = _summary(results)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "summary": summary,
    }, str(manifest_path))

    print(f"Won {summary['wins']}/{summary['games']} "
          f"(mean {summary['mean_guesses_when_won']} guesses)")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
