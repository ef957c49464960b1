from .validator import describe_wordlist, pretty_summary
from .io import (
    ReadError, WriteError, WriteOutcome, read_lines, read_words, trim_word, write_lines,
)

__all__ = [
    "describe_wordlist", "pretty_summary",
    "ReadError", "WriteError", "WriteOutcome", "read_lines", "read_words", "trim_word", "write_lines",
]
