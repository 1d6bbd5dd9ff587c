# apps/cli/run_multi.py
"""
Solve a file of puzzles against one dictionary with shared loading and progress.

Puzzle file format: one "<required> <extra>" pair per line, '#' comments ok.

Writes (with --outdir): <outdir>/batch_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse, logging, sys, time
from pathlib import Path

# Optional progress bar
try:
    from tqdm import tqdm  # pip install tqdm

    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from spellingbee.datasets import DEFAULT_DICT_PATH, SourceReadError, iter_words
from spellingbee.datasets import validate_wordlist, pretty_summary
from spellingbee.engine import ConfigurationError, DEFAULT_RULES, Rules
from spellingbee.harness import read_puzzles, run_puzzle
from spellingbee.harness.io import (write_csv, write_manifest, summarize, timestamp_id,
                                    git_commit_or_unknown)

APP_SHORT_NAME = "spellingbee"


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="spellingbee: solve many puzzles")
    ap.add_argument("puzzles", help="puzzle file, one '<required> <extra>' per line")
    ap.add_argument("-d", "--dict", dest="dict_path", default=DEFAULT_DICT_PATH,
                    help="path to a dictionary file (one word per line)")
    ap.add_argument("--min-length", type=int, default=DEFAULT_RULES.min_length,
                    help="shortest accepted answer")
    ap.add_argument("--sample", type=int, help="solve only the first K puzzles")
    ap.add_argument("--outdir", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if tqdm available, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        rules = Rules(min_length=args.min_length)
        puzzles = read_puzzles(args.puzzles, rules=rules)
    except ConfigurationError as e:
        ap.error(str(e))
    except SourceReadError as e:
        sys.stderr.write(f"{APP_SHORT_NAME} error: Failed to load puzzles ({e})\n")
        return 1

    # Every puzzle scans the whole list, so load it once
    try:
        words = list(iter_words(args.dict_path))
        rep = validate_wordlist(args.dict_path, min_length=rules.min_length)
    except SourceReadError as e:
        sys.stderr.write(f"{APP_SHORT_NAME} error: Failed to load dictionary ({e})\n")
        return 1
    print(pretty_summary(rep))

    if args.sample is not None:
        puzzles = puzzles[: args.sample]
    total = len(puzzles)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"
    if mode == "bar" and not _HAS_TQDM:
        mode = "plain"

    iterator = tqdm(puzzles, ncols=80, desc="Solving", unit="puzzle") if mode == "bar" else puzzles

    results = []
    start = time.time()
    last_print = 0.0
    for idx, pz in enumerate(iterator, 1):
        results.append(run_puzzle(pz, words, rules=rules))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain" and total:
        sys.stderr.write("\n"); sys.stderr.flush()

    for r in results:
        pangrams = ", ".join(r["pangrams"]) or "-"
        print(f"{r['letters']:<10} answers={r['num_answers']:<4} score={r['total_score']:<5} "
              f"pangrams={pangrams}")

    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = outdir / f"batch_{run_id}.csv"
        manifest_path = outdir / f"batch_{run_id}_manifest.json"

        write_csv(results, str(csv_path))
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlist": rep,
            "num_puzzles": len(results),
            "puzzles": [summarize(r) for r in results],
        }
        write_manifest(manifest, str(manifest_path))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
