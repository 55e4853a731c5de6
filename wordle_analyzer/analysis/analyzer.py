"""
Guess analysis: Expected Remaining Candidates.

For guess g, the current candidates split into buckets by the pattern each
would produce. If the answer is uniform over the n candidates, it lands in
bucket i with probability c_i / n and leaves c_i candidates, so

    E[left | g] = sum_i (c_i / n) * c_i = (1/n) * sum_i c_i^2

If g is itself a candidate, one outcome is an outright win (nothing left
rather than 1), so 1/n comes off before rounding.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List

from wordle_analyzer.engine import Pattern, calculate_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessAnalysis:
    expected_remaining: float   # rounded to 2 decimals
    bucket_count: int           # distinct patterns
    largest_bucket: int
    candidate_count: int

    @property
    def informative(self) -> bool:
        """True if the guess is expected to shrink the candidate set."""
        return self.expected_remaining < self.candidate_count


def bucket_map(guess: str, candidates: Iterable[str]) -> Dict[Pattern, int]:
    buckets: Dict[Pattern, int] = defaultdict(int)
    for ans in candidates:
        buckets[calculate_pattern(guess, ans)] += 1
    return dict(buckets)


def analyze(guess: str, candidates: Iterable[str]) -> GuessAnalysis:
    """Partition `candidates` by pattern against `guess` and summarize the buckets."""
    guess = guess.strip().lower()
    candidates: List[str] = list(candidates)
    n = len(candidates)
    if n == 0:
        logger.warning("Analyzing %r against an empty candidate set", guess)
        return GuessAnalysis(0.0, 0, 0, 0)

    buckets = bucket_map(guess, candidates)
    expected = sum(c * c for c in buckets.values()) / n
    if guess in candidates:
        expected -= 1 / n

    return GuessAnalysis(
        expected_remaining=round(expected, 2),
        bucket_count=len(buckets),
        largest_bucket=max(buckets.values()),
        candidate_count=n,
    )
