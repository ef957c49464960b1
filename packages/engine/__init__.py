from .translation import LETTER_TO_HEX, translate_letter, translate_word
from .validation import ALLOWED_LETTERS, is_hex_word
from .constraints import find_words, format_entry

__all__ = [
    "LETTER_TO_HEX", "translate_letter", "translate_word",
    "ALLOWED_LETTERS", "is_hex_word",
    "find_words", "format_entry",
]
