"""
Pipeline driver primitives.

- run_wordlist:  filter a loaded wordlist, sort the results, attach stats.
- compute_stats: word counts and the percentage of the list that qualifies.
- format_stats:  the console stats block.

These functions are intentionally UI-agnostic; reading, writing and progress
display live in packages.datasets and the CLI.
"""

from __future__ import annotations
from typing import Callable, Dict, Iterable, List

from packages.engine import find_words


def compute_stats(total: int, valid: int) -> Dict:
    """
    Counts plus the qualifying percentage.

    An empty wordlist reports 0.0 rather than dividing by zero.
    """
    if valid > total:
        raise ValueError(f"valid count {valid} exceeds total {total}")
    return {
        "total": total,
        "valid": valid,
        "percentage": 100.0 * valid / max(1, total),
    }


def run_wordlist(
        words: Iterable[str],
        *,
        translate: bool = False,
        progress: Callable[[List[str]], Iterable[str]] | None = None,
) -> Dict:
    """
    Run one wordlist through the filter.

    Args:
        words:      stripped, non-empty words (see datasets.read_words); a
                    list is expected, other iterables are materialized first
        translate:  append ':0x<glyphs>' to every result
        progress:   optional wrapper around the word list while filtering
                    (e.g. a tqdm bar); must yield every word unchanged

    Returns:
        dict with keys:
            results (sorted list[str]), total (int), valid (int),
            percentage (float)
    """
    words = list(words)
    stream = progress(words) if progress is not None else words
    results: List[str] = sorted(find_words(stream, translate=translate))
    out = {"results": results}
    out.update(compute_stats(len(words), len(results)))
    return out


def format_stats(stats: Dict) -> str:
    """
    Render the stats block printed at the end of a run.

    Example:
        == STATS ==
        Total Words in Wordlist: 4
        Valid Words: 3
        Percentage of wordlist expressable as Hexadecimals: ~75.0000%
    """
    return (
        "== STATS ==\n"
        f"Total Words in Wordlist: {stats['total']}\n"
        f"Valid Words: {stats['valid']}\n"
        f"Percentage of wordlist expressable as Hexadecimals: ~{stats['percentage']:.4f}%\n"
    )
