"""
Word filter.

This module answers the question: "Can this word be written in hex glyphs?"
A word qualifies iff every one of its characters, checked on its own, is in
ALLOWED_LETTERS.

Matching is exact: 'Cafe' is rejected because 'C' is not an allowed letter.
Input is never lowercased here; normalizing case is the caller's decision.
"""

from typing import FrozenSet

from .translation import LETTER_TO_HEX

# The 13 lowercase letters with a hex look-alike.
ALLOWED_LETTERS: FrozenSet[str] = frozenset(LETTER_TO_HEX)


def is_hex_word(word: str) -> bool:
    """
    Return True if every character of `word` is an allowed letter.

    The empty string qualifies vacuously; the readers in packages.datasets
    never produce it.
    """
    return all(ch in ALLOWED_LETTERS for ch in word)
