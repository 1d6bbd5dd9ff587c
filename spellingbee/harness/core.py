"""
Run harness core primitives.

- run_puzzle:   solve one puzzle against a word list, with timing.
- run_batch:    solve many puzzles against one preloaded word list.
- read_puzzles: parse a puzzle file ("<required> <extra>" per line).

These functions are UI-agnostic so they can be reused by the CLIs, a
notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Sequence

from spellingbee.datasets.io import read_lines
from spellingbee.engine import ConfigurationError, Puzzle, Rules, DEFAULT_RULES, solve

log = logging.getLogger(__name__)


def run_puzzle(puzzle: Puzzle, words: Iterable[str], *, rules: Rules = DEFAULT_RULES) -> Dict:
    """
    Solve one puzzle.

    Returns:
        dict with keys:
            required (str), letters (str), result_set (ResultSet),
            answers (list[Answer]),
            num_answers (int), pangrams (list[str]), total_score (int),
            time_ms (float)
    """
    t0 = time.perf_counter_ns()
    result = solve(puzzle, words, rules=rules)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "required": puzzle.required,
        "letters": puzzle.letters,
        "result_set": result,
        "answers": list(result.answers),
        "num_answers": len(result),
        "pangrams": [a.word for a in result.pangrams],
        "total_score": result.total_score,
        "time_ms": dt,
    }


def run_batch(
        puzzles: Sequence[Puzzle],
        words: Sequence[str],
        *,
        rules: Rules = DEFAULT_RULES,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many puzzles back-to-back. `words` must be re-iterable (a list), since
    every puzzle scans it. If `sample` is given only the first K puzzles run.
    """
    pool = list(puzzles)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for pz in pool:
        out.append(run_puzzle(pz, words, rules=rules))
    log.debug("ran %d puzzle(s) over %d word(s)", len(out), len(words))
    return out


def parse_puzzle_line(line: str, *, rules: Rules = DEFAULT_RULES) -> Puzzle:
    """
    "o bciprt" -> Puzzle(required="o", allowed={b,c,i,p,r,t,o})
    Raises ConfigurationError.
    """
    parts = line.split()
    if len(parts) != 2:
        raise ConfigurationError(f"expected '<required> <extra>'; got {line!r}")
    return Puzzle.from_letters(parts[0], parts[1], rules=rules)


def read_puzzles(path: str, *, rules: Rules = DEFAULT_RULES) -> List[Puzzle]:
    """
    Load puzzles from a text file. Blank lines and '#' comments are skipped.
    A bad line raises ConfigurationError naming the line number.
    """
    puzzles: List[Puzzle] = []
    for lineno, raw in enumerate(read_lines(path), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        try:
            puzzles.append(parse_puzzle_line(line, rules=rules))
        except ConfigurationError as e:
            raise ConfigurationError(f"{path}:{lineno}: {e}") from e
    return puzzles
