"""
Recompute the precomputed opening-guess table.

Scores every answer against the full answer list (expected remaining answers,
the same numbers the "candidates" ranker gives) and prints the best K as a
literal ready to paste into wordle_analyzer/datasets/openers.py. --vocabulary
widens the pool to every guessable word, which gives a different table.

The pattern table is ~|pool| x |answers| calculations, so this takes a
while; the progress bar tracks rows.

Usage:
    python -m script.compute_openers --top 20
    python -m script.compute_openers --vocabulary     # every guessable word as opener
    python -m script.compute_openers --answers my_answers.txt --allowed my_allowed.txt
"""

import argparse
from typing import Callable, List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from wordle_analyzer.analysis.table import expected_remaining, pattern_matrix
from wordle_analyzer.config import TOP_N
from wordle_analyzer.datasets import Dictionary, load_dictionary


def rank_openers(dictionary: Dictionary, *, vocabulary: bool = False, top: int = TOP_N,
                 progress: Optional[Callable] = None) -> List[Tuple[str, float]]:
    """Best `top` first guesses for a fresh game, values rounded to one decimal."""
    answers = list(dictionary.answers)
    pool = list(dictionary.guesses) if vocabulary else answers

    matrix = pattern_matrix(pool, answers, progress=progress)
    scores = expected_remaining(pool, answers, matrix=matrix)
    order = np.argsort(scores, kind="stable")[:top]
    return [(pool[i], round(float(scores[i]), 1)) for i in order]


def main():
    ap = argparse.ArgumentParser(description="Rank opening guesses by expected remaining answers")
    ap.add_argument("--answers", help="answers list (default: bundled)")
    ap.add_argument("--allowed", help="allowed guesses (default: bundled)")
    ap.add_argument("--top", type=int, default=TOP_N, help="how many openers to print")
    ap.add_argument("--vocabulary", action="store_true",
                    help="consider every guessable word as an opener, not just answers")
    args = ap.parse_args()

    dictionary = load_dictionary(args.answers, args.allowed, openers=())
    total = len(dictionary.guesses if args.vocabulary else dictionary.answers)
    ranked = rank_openers(dictionary, vocabulary=args.vocabulary, top=args.top,
                          progress=lambda rows: tqdm(rows, total=total, ncols=80, unit="word"))

    print("OPENING_GUESSES: Final[Tuple[Tuple[str, float], ...]] = (")
    for word, er in ranked:
        print(f'    ("{word}", {er}),')
    print(")")


if __name__ == "__main__":
    main()
