from .core import run_wordlist, compute_stats, format_stats
from .io import write_manifest, timestamp_id, git_commit_or_unknown

__all__ = [
    "run_wordlist", "compute_stats", "format_stats",
    "write_manifest", "timestamp_id", "git_commit_or_unknown",
]
