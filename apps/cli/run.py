# apps/cli/run.py
"""
CLI entry point for hex-words.

This script:
  1) Reads a newline-delimited wordlist (blank lines dropped, words trimmed).
  2) Keeps the words that can be spelled with hex glyphs, optionally appending
     their translation (fig -> fig:0xF16), and sorts them.
  3) Optionally writes the results (one per line) and a JSON manifest.
  4) Prints summary stats.

Usage:
    hex-words words.txt -o hexwords.txt --translate
    python -m apps.cli.run words.txt
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterator, List

from tqdm import tqdm

from packages.datasets import (
    ReadError, WriteError, describe_wordlist, pretty_summary, read_words, write_lines,
)
from packages.harness import run_wordlist, format_stats
from packages.harness.io import write_manifest, timestamp_id, git_commit_or_unknown

VERSION = "0.1.0"


def _plain_progress(words: List[str]) -> Iterator[str]:
    """
    Yield `words` while printing a throttled progress line on stderr.
    """
    total = len(words)
    start = time.time()
    last_print = 0.0
    for idx, w in enumerate(words, 1):
        yield w
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
            sys.stderr.flush()
            last_print = now
    if total:
        sys.stderr.write("\n"); sys.stderr.flush()


def _bar_progress(words: List[str]) -> Iterator[str]:
    return tqdm(words, ncols=80, desc="Filtering", unit="word")


def _pick_progress(mode: str):
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if mode == "bar":
        return _bar_progress
    if mode == "plain":
        return _plain_progress
    return None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="hex-words",
        description="Finds all the words in a given wordlist that can be created "
                    "with hexadecimal numbers",
    )
    ap.add_argument("path", help="path to the wordlist (newline-delimited .txt file)")
    ap.add_argument("-o", "--output", help="path to output the found words")
    ap.add_argument("-t", "--translate", action="store_true",
                    help="append the hex translation to each word (fig:0xF16)")
    ap.add_argument("--manifest", help="also write a JSON manifest of the run to this path")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show filtering progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="print a one-line wordlist summary on stderr")
    ap.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, filter the wordlist, write outputs and print stats.
    Returns the process exit status.
    """
    args = build_parser().parse_args(argv)

    # 1) Load the whole wordlist (fatal if unreadable)
    try:
        words = read_words(args.path)
    except ReadError as e:
        print(f"hex-words: error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(pretty_summary(describe_wordlist(args.path)), file=sys.stderr)

    # 2) Filter + sort
    run = run_wordlist(words, translate=args.translate, progress=_pick_progress(args.progress))

    # 3) Write results; a per-line failure still falls through to the stats
    status = 0
    if args.output:
        try:
            outcome = write_lines(run["results"], args.output)
        except WriteError as e:
            print(f"hex-words: error: {e}", file=sys.stderr)
            return 1
        if outcome.ok:
            print(f"Successfully wrote results to {outcome.path}!\n")
        else:
            print("Failed to write results!")
            print(f"hex-words: wrote {outcome.written}/{outcome.total} lines to "
                  f"{outcome.path}: {outcome.error}", file=sys.stderr)
            status = 1

    stats = {k: run[k] for k in ("total", "valid", "percentage")}

    # 4) Optional manifest
    if args.manifest:
        manifest = {
            "run_id": timestamp_id(),
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlist": describe_wordlist(args.path),
            "stats": stats,
        }
        try:
            write_manifest(manifest, args.manifest)
        except OSError as e:
            print(f"hex-words: cannot write manifest {args.manifest}: {e}", file=sys.stderr)
            status = 1

    # 5) Stats
    print(format_stats(stats))
    return status


if __name__ == "__main__":
    sys.exit(main())
