"""
Word list validator for spellingbee.

What this module does:
- Check a dictionary file (one word per line) before solving against it.
- Count valid (alphabetic) words, case-folded unique words, invalid lines and
  words too short to ever be an answer; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from spellingbee.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("/usr/share/dict/words")
    print(pretty_summary(rep))

Unlike the solver, this is strict about formatting: a dictionary with
punctuation or digits still works (those lines can never match), but it is
reported so the list can be cleaned.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from spellingbee.engine.puzzle import DEFAULT_RULES


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordListReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    lines: int           # non-blank lines
    count: int           # alphabetic words
    unique_count: int    # unique words after lowercasing
    invalid_lines: int   # lines with non-letters (digits, apostrophes, spaces...)
    short_words: int     # valid words shorter than min_length
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    min_length: int
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


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


def _load_and_check(path: Path) -> Tuple[List[str], int, int]:
    """
    Returns:
      (valid_words, non_blank_lines, invalid_count)
    """
    valid: List[str] = []
    lines = 0
    invalid = 0

    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            lines += 1
            if w.isalpha():
                valid.append(w)
            else:
                invalid += 1

    return valid, lines, invalid


def _failed_report(path: str, exists: bool, min_length: int, issue: str) -> Dict:
    rep = WordListReport(
        path=path, exists=exists, lines=0, count=0, unique_count=0,
        invalid_lines=0, short_words=0, sha256="", min_length=min_length,
        passed=False, issues=[issue],
    )
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, min_length: int = DEFAULT_RULES.min_length) -> Dict:
    """
    Validate a dictionary file for solving.

    Parameters
    ----------
    path : str
        Word list, one word per line.
    min_length : int
        Shortest answer length; shorter words are counted as dead weight.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport). `passed` requires
        the file to exist and hold at least one word of min_length or more.
        Invalid lines and duplicates are reported but do not fail it.
    """
    p = Path(path)
    if not p.exists():
        return _failed_report(path, False, min_length, f"word list not found: {path}")

    # exists but unreadable: a directory, no permission, ...
    try:
        words, lines, invalid = _load_and_check(p)
        sha = _sha256_file(p)
    except OSError as e:
        return _failed_report(path, True, min_length, f"word list unreadable: {e}")

    unique = {w.lower() for w in words}
    short = sum(1 for w in words if len(w) < min_length)

    issues: List[str] = []
    usable = len(words) - short
    if usable == 0:
        issues.append(f"word list contains 0 words of length >= {min_length}")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(unique) != len(words):
        issues.append(f"word list has {len(words) - len(unique)} duplicate(s) after lowercasing")

    rep = WordListReport(
        path=str(p),
        exists=True,
        lines=lines,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        short_words=short,
        sha256=sha,
        min_length=min_length,
        passed=usable > 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=235976 (uniq=234371, short=1402, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, short={report['short_words']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
