"""
Guess ranking: best guesses by expected remaining candidates, lowest first.

On a fresh game (candidate set as large as the answer list) the dictionary's
precomputed opening table is returned as-is. Otherwise a ranking strategy
scores a pool of words:

  - "candidates": only the remaining candidates. Cheap and close to optimal
                  once the set is small, though a non-candidate can
                  occasionally split the buckets better.
  - "vocabulary": every guessable word, via the numpy pattern table.
                  Ties go to candidates (they can win outright).

The opening table holds the "candidates" ranking, and it is returned on a fresh
game whichever strategy is asked for, "vocabulary" included.

Results are recomputed on every call; candidate sets differ guess to guess.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Type

from wordle_analyzer.config import DEFAULT_STRATEGY, TOP_N
from wordle_analyzer.datasets import Dictionary, default_dictionary
from .analyzer import analyze
from .table import expected_remaining

logger = logging.getLogger(__name__)

Ranking = List[Tuple[str, float]]

# ---- Strategy registry ----
REGISTRY: Dict[str, Type["BaseRanker"]] = {}


def register(cls: Type["BaseRanker"]) -> Type["BaseRanker"]:
    """
    Decorator: @register on a ranker class adds it to REGISTRY by its `id`.
    """
    rid = getattr(cls, "id", None)
    if not rid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if rid in REGISTRY:
        raise ValueError(f"Duplicate ranker id: {rid}")
    REGISTRY[rid] = cls
    return cls


class BaseRanker:
    id = "base"
    name = "Base"

    def rank(self, candidates: List[str], dictionary: Dictionary, limit: int) -> Ranking:
        raise NotImplementedError("Override in subclass")


@register
class CandidateRanker(BaseRanker):
    id = "candidates"
    name = "Remaining candidates only"

    def rank(self, candidates: List[str], dictionary: Dictionary, limit: int) -> Ranking:
        scored = [(w, analyze(w, candidates).expected_remaining) for w in candidates]
        # sorted() is stable: ties keep candidate order
        scored.sort(key=lambda pair: pair[1])
        return scored[:limit]


@register
class VocabularyRanker(BaseRanker):
    id = "vocabulary"
    name = "Full guess vocabulary"

    def rank(self, candidates: List[str], dictionary: Dictionary, limit: int) -> Ranking:
        cand_set = set(candidates)
        pool = candidates + [w for w in dictionary.guesses if w not in cand_set]

        expected = expected_remaining(pool, candidates)
        # Stable on the rounded value, then prefer words that could be the answer
        order = sorted(range(len(pool)), key=lambda i: (expected[i], pool[i] not in cand_set))
        return [(pool[i], float(expected[i])) for i in order[:limit]]


def create_ranker(strategy: str) -> BaseRanker:
    """
    Factory: instantiate a registered ranker by id.
    """
    try:
        cls = REGISTRY[strategy]
    except KeyError as e:
        raise ValueError(
            f"Unknown ranking strategy: {strategy}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_ranker_ids() -> List[str]:
    return sorted(REGISTRY.keys())


def top_guesses(candidates: Iterable[str], dictionary: Optional[Dictionary] = None, *,
                limit: int = TOP_N, strategy: str = DEFAULT_STRATEGY) -> Ranking:
    """
    Return up to `limit` (word, expected_remaining) pairs, best first.
    """
    dictionary = dictionary or default_dictionary()
    ranker = create_ranker(strategy)
    candidates = list(candidates)

    if not candidates:
        logger.warning("top_guesses called with no remaining candidates")
        return []

    # Fresh game: the full answer list is the only set this large
    if dictionary.openers and len(candidates) == len(dictionary.answers):
        return list(dictionary.openers[:limit])

    logger.debug("Ranking %d candidates with %s", len(candidates), ranker.id)
    return ranker.rank(candidates, dictionary, limit)
