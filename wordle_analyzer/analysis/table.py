"""
Vectorized bucket statistics over many guesses at once.

Each (guess, answer) pattern is stored as its base-3 code (0..3**N - 1) in a
uint8/uint16 matrix; bucket sizes per guess then fall out of one bincount.
Used by the full-vocabulary ranker and by script/compute_openers.py.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

import numpy as np

from wordle_analyzer.engine import calculate_pattern, pattern_code


def pattern_matrix(guesses: Sequence[str], answers: Sequence[str], *,
                   progress: Optional[Callable[[Iterable], Iterable]] = None) -> np.ndarray:
    """
    Return a (len(guesses), len(answers)) matrix of pattern codes.

    Args:
      progress: optional wrapper for the row iterator (e.g. tqdm)
    """
    N = len(answers[0]) if answers else 0
    dtype = np.uint8 if 3 ** N <= 256 else np.uint16
    out = np.empty((len(guesses), len(answers)), dtype=dtype)

    rows = enumerate(guesses)
    if progress is not None:
        rows = progress(rows)
    for i, g in rows:
        out[i] = [pattern_code(calculate_pattern(g, a)) for a in answers]
    return out


def bucket_counts(matrix: np.ndarray, N: int) -> np.ndarray:
    """(G, 3**N) array: how many answers each guess sends to each pattern."""
    n_codes = 3 ** N
    G = matrix.shape[0]
    offsets = matrix.astype(np.int64) + n_codes * np.arange(G, dtype=np.int64)[:, None]
    return np.bincount(offsets.ravel(), minlength=n_codes * G).reshape(G, n_codes)


def expected_remaining(guesses: Sequence[str], candidates: Sequence[str], *,
                       matrix: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Expected remaining candidates for every guess, same formula and rounding
    as analyzer.analyze().
    """
    n = len(candidates)
    if n == 0:
        return np.zeros(len(guesses))
    if matrix is None:
        matrix = pattern_matrix(guesses, candidates)

    counts = bucket_counts(matrix, len(candidates[0]))
    expected = (counts.astype(np.float64) ** 2).sum(axis=1) / n

    cand_set = set(candidates)
    is_candidate = np.fromiter((g in cand_set for g in guesses), dtype=bool, count=len(guesses))
    expected -= is_candidate / n
    return np.round(expected, 2)
