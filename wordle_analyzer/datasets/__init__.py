from .validator import validate_wordlists, pretty_summary
from .io import read_words, write_words
from .dictionary import Dictionary, load_dictionary, default_dictionary, ANSWERS_PATH, ALLOWED_PATH
from .openers import OPENING_GUESSES

__all__ = [
    "validate_wordlists", "pretty_summary", "read_words", "write_words", "Dictionary",
    "load_dictionary", "default_dictionary", "ANSWERS_PATH", "ALLOWED_PATH", "OPENING_GUESSES",
]
