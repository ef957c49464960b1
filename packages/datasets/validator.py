"""
Wordlist diagnostics for hex-words runs.

What this module does:
- Describe one input wordlist: does it exist, SHA-256 of the raw bytes,
  how many lines, how many of them are blank, how many words remain after
  trimming and how many of those are unique.
- Collect human-friendly issues (missing file, no words, duplicates).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import describe_wordlist, pretty_summary
    rep = describe_wordlist("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import read_lines, trim_word


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class WordlistReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    lines: int           # raw line count
    blank_lines: int     # lines that are empty after trimming
    count: int           # words after trimming (blank lines dropped)
    unique_count: int    # distinct words
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def describe_wordlist(path: str) -> Dict:
    """
    Summarize the wordlist at `path`.

    A missing file is reported (exists=False plus an issue), not raised.
    Undecodable content raises UnicodeDecodeError; read the words with
    datasets.io.read_words first if you want a ReadError instead.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema).
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(path, False, "", 0, 0, 0, 0,
                             issues=[f"wordlist not found: {path}"])
        return asdict(rep)

    raw = read_lines(p)
    words = [w for w in (trim_word(ln) for ln in raw) if w]

    rep = WordlistReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        lines=len(raw),
        blank_lines=len(raw) - len(words),
        count=len(words),
        unique_count=len(set(words)),
    )

    if rep.count == 0:
        rep.issues.append("wordlist contains 0 words")
    if rep.count != rep.unique_count:
        rep.issues.append(f"wordlist contains {rep.count - rep.unique_count} duplicate word(s)")

    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.txt | words=370105 (uniq=370105, blank=0, sha=abc123...) | OK
    """
    status = "OK" if not report["issues"] else "; ".join(report["issues"])
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, blank={report['blank_lines']}, sha={sha}) "
        f"| {status}"
    )
