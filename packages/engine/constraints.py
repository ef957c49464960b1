"""
Wordlist filtering.

Given:
  - a sequence of words (already stripped, no blanks)
  - whether to append the hex translation

Return:
  - the words that can be spelled with hex glyphs, in input order,
    optionally as "word:0x<glyphs>".

Sorting is left to the harness so this stays a plain filter.
"""

from typing import Iterable, List

from .translation import translate_word
from .validation import is_hex_word


def format_entry(word: str, translate: bool = False) -> str:
    """Result line for one qualifying word: 'fig' or 'fig:0xF16'."""
    if translate:
        return f"{word}:{translate_word(word)}"
    return word


def find_words(words: Iterable[str], translate: bool = False) -> List[str]:
    """
    Keep only words accepted by is_hex_word.

    Args:
      words     : iterable of words
      translate : if True, each kept word is suffixed with its hex rendering

    Returns:
      List[str] of result entries (order preserved as in `words`).
    """
    out: List[str] = []

    for w in words:
        if is_hex_word(w):
            out.append(format_entry(w, translate))

    return out
