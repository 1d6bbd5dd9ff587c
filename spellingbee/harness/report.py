"""
Plain-text rendering of a ResultSet.

Pangrams are listed first and marked with '*', then the remaining answers.
Both groups keep the ResultSet order (score descending, word ascending).
"""

from __future__ import annotations

from typing import List

from spellingbee.engine import ResultSet


def format_answer(word: str, score: int, pangram: bool) -> str:
    mark = "*" if pangram else " "
    return f"{mark} {score:<2} {word}"


def format_report(result: ResultSet) -> List[str]:
    lines = [format_answer(a.word, a.score, True) for a in result.pangrams]
    lines += [format_answer(a.word, a.score, False) for a in result if not a.is_pangram]
    lines.append(
        f"{len(result)} answer(s), {len(result.pangrams)} pangram(s), "
        f"total score {result.total_score}"
    )
    return lines
