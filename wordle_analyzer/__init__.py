"""
Wordle analyzer: scoring, candidate tracking and guess ranking for a
Wordle-style game. The names below are the whole caller-facing API.
"""

from .engine import Color, Pattern, calculate_pattern, analyze_cheat, prune_answers
from .analysis import GuessAnalysis, analyze, top_guesses
from .datasets import Dictionary, default_dictionary, load_dictionary
from .session import (GameState, Session, cheat_guess, clear_error, guess, hint_for, keyboard_colors,
                      new_cheat_game, new_game)

__version__ = "1.0.0"

__all__ = [
    "Color", "Pattern", "calculate_pattern", "analyze_cheat", "prune_answers", "GuessAnalysis",
    "analyze", "top_guesses", "Dictionary", "default_dictionary", "load_dictionary", "GameState",
    "Session", "cheat_guess", "clear_error", "guess", "hint_for", "keyboard_colors",
    "new_cheat_game", "new_game",
]
