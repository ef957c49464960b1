from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List


class ReadError(OSError):
    """The wordlist could not be opened or decoded."""


class WriteError(OSError):
    """The output file could not be created."""


@dataclass
class WriteOutcome:
    """What write_lines managed to put on disk."""
    path: str
    written: int         # lines fully written
    total: int           # lines requested
    error: str | None    # first per-line failure, if any

    @property
    def ok(self) -> bool:
        return self.error is None


# Unicode White_Space; str.strip() would also drop the \x1c-\x1f separators.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def trim_word(line: str) -> str:
    """Strip WHITESPACE from both ends of one wordlist line."""
    return line.strip(WHITESPACE)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines split on '\\n' only, stripping a trailing CR.
    A final newline does not produce an extra empty line.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    lines = p.read_text(encoding="utf-8").split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln.rstrip("\r") for ln in lines]


def read_words(p: Path | str) -> List[str]:
    """
    Read a newline-delimited wordlist fully into memory.

    Each line is trimmed with trim_word; lines that end up empty
    are dropped. Raises ReadError (chained to the OS/codec error) if the file
    can't be opened or isn't valid UTF-8.
    """
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"cannot read wordlist {p}: {e}") from e
    return [w for w in (trim_word(ln) for ln in text.split("\n")) if w]


def write_lines(lines: Iterable[str], p: Path | str) -> WriteOutcome:
    """
    Write each line, newline-terminated, to a UTF-8 text file (created or truncated).

    Raises WriteError if the file can't be created. If writing an individual
    line fails, stop there and report it in the returned WriteOutcome; lines
    already written stay on disk.
    """
    p = Path(p)
    lines = list(lines)
    try:
        # line-buffered so a failing line surfaces from its own write()
        f = p.open("w", buffering=1, encoding="utf-8", newline="\n")
    except OSError as e:
        raise WriteError(f"cannot create output file {p}: {e}") from e

    written = 0
    error = None
    try:
        for line in lines:
            f.write(line + "\n")
            written += 1
    except OSError as e:
        error = str(e)
    finally:
        # close() re-flushes whatever the failed write left buffered
        try:
            f.close()
        except OSError as e:
            if error is None:
                error = str(e)
    return WriteOutcome(path=str(p), written=written, total=len(lines), error=error)
