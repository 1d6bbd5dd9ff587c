"""
I/O utilities for solver runs.

Responsibilities:
- write_csv:     flatten per-puzzle results into a tidy CSV (one row per answer).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = ["required", "letters", "rank", "word", "score", "is_pangram"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of puzzle results to CSV.

    Schema (columns):
      required, letters, rank, word, score, is_pangram

    Puzzles with no answers contribute no rows. Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in results:
            for rank, ans in enumerate(r["answers"], start=1):
                w.writerow({
                    "required": r["required"],
                    "letters": r["letters"],
                    "rank": rank,
                    "word": ans.word,
                    "score": ans.score,
                    "is_pangram": ans.is_pangram,
                })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word list summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (letters, dict path, min length, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - puzzles: per-puzzle totals
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def summarize(result: Dict) -> Dict:
    """JSON-friendly per-puzzle totals (drops the Answer objects)."""
    return {
        "letters": result["letters"],
        "num_answers": result["num_answers"],
        "pangrams": result["pangrams"],
        "total_score": result["total_score"],
        "time_ms": round(float(result["time_ms"]), 3),
    }


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
