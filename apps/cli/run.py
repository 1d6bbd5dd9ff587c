# apps/cli/run.py
"""
CLI entry point for solving one Spelling Bee puzzle.

This script:
  1) Parses the required letter and the other letters into a Puzzle
     (bad letters are a usage error).
  2) Optionally validates the word list and prints a one-line summary.
  3) Streams the dictionary through the scanner and prints every answer,
     pangrams first, followed by the totals.
  4) With --outdir, also writes:
       - CSV:  one row per answer (rank, word, score, pangram flag)
       - JSON: manifest with config, word list hash, git commit, etc.

Usage:
    python -m apps.cli.run o bciprt
    python -m apps.cli.run -d words.txt --outdir reports o bciprt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from spellingbee.datasets import DEFAULT_DICT_PATH, SourceReadError, iter_words
from spellingbee.datasets import validate_wordlist, pretty_summary
from spellingbee.engine import ConfigurationError, DEFAULT_RULES, Puzzle, Rules
from spellingbee.harness import run_puzzle, format_report
from spellingbee.harness.io import (write_csv, write_manifest, summarize, timestamp_id,
                                    git_commit_or_unknown)

APP_SHORT_NAME = "spellingbee"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog=APP_SHORT_NAME,
                                 description="Finds answers to the spelling bee game.")
    ap.add_argument("required_char", help="letter required to be in every answer")
    ap.add_argument("extra_chars", help="other letters allowed in an answer")
    ap.add_argument("-d", "--dict", dest="dict_path", default=DEFAULT_DICT_PATH,
                    help="path to a dictionary file (one word per line)")
    ap.add_argument("--min-length", type=int, default=DEFAULT_RULES.min_length,
                    help="shortest accepted answer")
    ap.add_argument("--validate", action="store_true",
                    help="print a word list summary before solving")
    ap.add_argument("--outdir", help="write CSV + JSON manifest to this directory")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return ap


def main(argv=None) -> int:
    """
    Parse CLI args, solve, print the report, and optionally write outputs.
    Returns the process exit code.
    """
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Puzzle letters; ap.error exits with status 2
    try:
        rules = Rules(min_length=args.min_length)
        puzzle = Puzzle.from_letters(args.required_char, args.extra_chars, rules=rules)
    except ConfigurationError as e:
        ap.error(str(e))

    # 2) Optional word list summary (counts, SHA), then solve
    rep = None
    try:
        if args.validate or args.outdir:
            rep = validate_wordlist(args.dict_path, min_length=rules.min_length)
            if args.validate:
                print(pretty_summary(rep))
        result = run_puzzle(puzzle, iter_words(args.dict_path), rules=rules)
    except SourceReadError as e:
        sys.stderr.write(f"{APP_SHORT_NAME} error: Failed to load dictionary ({e})\n")
        return 1

    for line in format_report(result["result_set"]):
        print(line)

    # 3) Outputs (CSV + manifest)
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"run_{run_id}.csv"
        manifest_path = outdir / f"run_{run_id}_manifest.json"

        write_csv([result], str(csv_path))
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlist": rep,
            "puzzles": [summarize(result)],
        }
        write_manifest(manifest, str(manifest_path))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
