"""
Run artifacts.

Responsibilities:
- write_manifest: dump a JSON manifest with config, wordlist report and stats.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

The result list itself is written by datasets.io.write_lines; the manifest
only records counts so it stays small for large wordlists.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict
import json
import subprocess
import datetime as dt


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest describing one run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (path, output, translate, ...)
      - wordlist: output of datasets.describe_wordlist(...)
      - stats: total / valid / percentage from harness.compute_stats
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
