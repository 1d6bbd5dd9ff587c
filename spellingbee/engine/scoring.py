"""
Spelling Bee scoring for a single accepted answer.

Conventions (NYT):
  - an answer of exactly the minimum length scores 1 point
  - longer answers score 1 point per letter
  - a pangram (uses every puzzle letter at least once) adds a fixed bonus,
    applied once no matter how often letters repeat

These helpers assume the word already passed validation; see
validation.evaluate for the full check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Optional

from .puzzle import DEFAULT_RULES, Rules


@dataclass(frozen=True)
class Answer:
    word: str         # normalized (lowercase) form
    score: int        # >= 1
    is_pangram: bool


def is_pangram(word: str, allowed: AbstractSet[str], *, rules: Rules = DEFAULT_RULES) -> bool:
    """
    True if `word` uses every letter of a full puzzle.

    Puzzles with fewer than rules.letter_count letters have no pangrams.

    Examples:
      is_pangram("tropicb", set("bciprto")) -> True
      is_pangram("robot", set("bciprto"))   -> False
    """
    if len(allowed) != rules.letter_count:
        return False
    return set(word) >= set(allowed)


def score_word(
        word: str,
        allowed: AbstractSet[str],
        *,
        min_length: Optional[int] = None,
        rules: Rules = DEFAULT_RULES,
) -> int:
    """
    Points for an accepted answer.

    Examples:
      score_word("boot", set("bciprto"))    -> 1
      score_word("robot", set("bciprto"))   -> 5
      score_word("tropicb", set("bciprto")) -> 14
    """
    if min_length is None:
        min_length = rules.min_length
    n = len(word)
    points = rules.short_word_points if n == min_length else n
    if is_pangram(word, allowed, rules=rules):
        points += rules.pangram_bonus
    return points
