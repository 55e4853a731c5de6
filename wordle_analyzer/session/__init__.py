from .game import (GameState, GuessRecord, Session, NO_MATCH_ERROR, cheat_guess, clear_error, guess,
                   new_cheat_game, new_game)
from .hints import GuessHint, PlayMode, hint_for, keyboard_colors

__all__ = [
    "GameState", "GuessRecord", "Session", "NO_MATCH_ERROR", "cheat_guess", "clear_error", "guess",
    "new_cheat_game", "new_game", "GuessHint", "PlayMode", "hint_for", "keyboard_colors",
]
