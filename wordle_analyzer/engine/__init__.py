from .scoring import Color, Pattern, calculate_pattern, is_win, parse_pattern, pattern_code, pattern_to_str
from .constraints import prune_answers, analyze_cheat, filter_candidates
from .validation import validate_guess

__all__ = [
    "Color", "Pattern", "calculate_pattern", "is_win", "parse_pattern", "pattern_code",
    "pattern_to_str", "prune_answers", "analyze_cheat", "filter_candidates", "validate_guess",
]
