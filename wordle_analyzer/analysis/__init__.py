from .analyzer import GuessAnalysis, analyze, bucket_map
from .ranker import BaseRanker, REGISTRY, create_ranker, get_ranker_ids, register, top_guesses

__all__ = [
    "GuessAnalysis", "analyze", "bucket_map", "BaseRanker", "REGISTRY", "create_ranker",
    "get_ranker_ids", "register", "top_guesses",
]
