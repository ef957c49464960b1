"""
Hex "spelling" of words.

Conventions:
  - a..f  -> the hex digits A..F (uppercase)
  - g,i,l,o,s,t,z -> look-alike decimal digits 6,1,1,0,5,7,2
  - anything else -> '?'

The table is many-to-one ('i' and 'l' both read as '1'), so translation is
not reversible. Callers are expected to filter words first (see
validation.is_hex_word); the '?' fallback only shows up on unfiltered input.

Examples:
  translate_word("fig")  -> "0xF16"
  translate_word("zest") -> "0x2E57"
"""

from types import MappingProxyType
from typing import Mapping

UNTRANSLATABLE = "?"

# Read-only, built once at import time.
LETTER_TO_HEX: Mapping[str, str] = MappingProxyType({
    "a": "A",
    "b": "B",
    "c": "C",
    "d": "D",
    "e": "E",
    "f": "F",
    "g": "6",
    "i": "1",
    "l": "1",
    "o": "0",
    "s": "5",
    "t": "7",
    "z": "2",
})


def translate_letter(ch: str) -> str:
    """Return the hex glyph for `ch`, or '?' if it has none."""
    return LETTER_TO_HEX.get(ch, UNTRANSLATABLE)


def translate_word(word: str) -> str:
    """
    Render `word` as a hex literal: '0x' followed by one glyph per character.

    Postcondition:
      - len(result) == len(word) + 2
    """
    return "0x" + "".join(translate_letter(ch) for ch in word)
