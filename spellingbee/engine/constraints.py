"""
Scanning a word source for every answer to one puzzle.

Given:
  - the required letter and the allowed letter set
  - an iterable of candidate words (consumed once, in order)

Return:
  - a ResultSet: answers ranked by score (high first), ties broken
    alphabetically, plus the pangram subset and the total score.

Duplicate policy: keep-first by normalized (lowercase) word. System
dictionaries often carry both "Robot" and "robot"; only one answer results.

A malformed configuration or an empty source yields an empty ResultSet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from .puzzle import DEFAULT_RULES, Puzzle, Rules
from .scoring import Answer
from .validation import Letters, evaluate, is_valid_word

log = logging.getLogger(__name__)


def ranking_key(answer: Answer) -> Tuple[int, str]:
    """Sort key: score descending, then word ascending."""
    return -answer.score, answer.word


@dataclass(frozen=True)
class ResultSet:
    answers: Tuple[Answer, ...] = ()

    @property
    def pangrams(self) -> Tuple[Answer, ...]:
        return tuple(a for a in self.answers if a.is_pangram)

    @property
    def total_score(self) -> int:
        return sum(a.score for a in self.answers)

    def words(self) -> List[str]:
        return [a.word for a in self.answers]

    def __len__(self) -> int:
        return len(self.answers)

    def __iter__(self) -> Iterator[Answer]:
        return iter(self.answers)


def iter_answers(
        required: str,
        allowed: Letters,
        words: Iterable[str],
        *,
        min_length: Optional[int] = None,
        rules: Rules = DEFAULT_RULES,
) -> Iterator[Answer]:
    """
    Lazily yield each answer in source order, skipping repeats.
    """
    if min_length is None:
        min_length = rules.min_length
    seen: Set[str] = set()
    dupes = 0
    for w in words:
        ans = evaluate(required, allowed, w, min_length, rules=rules)
        if ans is None:
            continue
        if ans.word in seen:
            dupes += 1
            continue
        seen.add(ans.word)
        yield ans
    if dupes:
        log.debug("skipped %d duplicate answer(s)", dupes)


def scan(
        required: str,
        allowed: Letters,
        words: Iterable[str],
        *,
        min_length: Optional[int] = None,
        rules: Rules = DEFAULT_RULES,
) -> ResultSet:
    """
    Evaluate every candidate and collect the answers into a ranked ResultSet.

    Examples:
      scan("o", "bciprto", ["robot", "loon", "boot"]).words() -> ["robot", "boot"]
      scan("o", "bciprto", []).total_score                    -> 0
    """
    answers = sorted(
        iter_answers(required, allowed, words, min_length=min_length, rules=rules),
        key=ranking_key,
    )
    result = ResultSet(tuple(answers))
    log.debug("scan required=%r: %d answer(s), %d pangram(s), total=%d",
              required, len(result), len(result.pangrams), result.total_score)
    return result


def solve(puzzle: Puzzle, words: Iterable[str], *, rules: Rules = DEFAULT_RULES) -> ResultSet:
    """Scan with an already-validated Puzzle."""
    return scan(puzzle.required, puzzle.allowed, words, rules=rules)


def find_all(words: Iterable[str], required: str, extra: str) -> List[str]:
    """
    Every word in `words` that is a valid answer, in input order, as given.

    No dedupe, sorting or scoring; see scan for the ranked form.
    """
    return [w for w in words if is_valid_word(w, required, extra)]
