"""
Candidate validation: "Is this word an answer to the puzzle?"

A word is an answer iff:
  - it is a string of at least `min_length` characters
  - every character (case-insensitive) is one of the allowed letters
  - it contains the required letter at least once

No-match is returned as None, never raised. A malformed configuration
(required letter missing from `allowed`, empty or oversized letter set)
also yields None for every word so a scan over it just comes back empty.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Optional, Union

from .puzzle import DEFAULT_RULES, Rules, normalize_letters
from .scoring import Answer, is_pangram, score_word

Letters = Union[str, AbstractSet[str], Iterable[str]]


def _normalize_config(required, allowed: Letters, rules: Rules) -> Optional[tuple]:
    """Lowercase the puzzle letters; None if they can't form a puzzle."""
    if not isinstance(required, str) or len(required) != 1:
        return None
    try:
        allowed_set = normalize_letters(allowed)
    except (TypeError, AttributeError):
        return None
    req = required.lower()
    if req not in allowed_set or len(allowed_set) > rules.letter_count:
        return None
    if not all(len(ch) == 1 and ch.isalpha() for ch in allowed_set):
        return None
    return req, allowed_set


def evaluate(
        required: str,
        allowed: Letters,
        word: str,
        min_length: Optional[int] = None,
        *,
        rules: Rules = DEFAULT_RULES,
) -> Optional[Answer]:
    """
    Score `word` against the puzzle, or return None if it doesn't qualify.

    Args:
      required   : the center letter
      allowed    : all playable letters, including `required`
      word       : candidate (any case)
      min_length : shortest accepted answer; defaults to rules.min_length
      rules      : scoring constants

    Examples:
      evaluate("o", "bciprto", "robot")   -> Answer("robot", 5, False)
      evaluate("o", "bciprto", "loon")    -> None   ('l' not allowed)
      evaluate("O", "BCIPRTO", "TROPICB") -> Answer("tropicb", 14, True)
    """
    if min_length is None:
        min_length = rules.min_length
    if not isinstance(word, str):
        return None

    config = _normalize_config(required, allowed, rules)
    if config is None:
        return None
    req, allowed_set = config

    w = word.lower()
    if len(w) < min_length:
        return None
    if any(ch not in allowed_set for ch in w):
        return None
    if req not in w:
        return None

    return Answer(
        word=w,
        score=score_word(w, allowed_set, min_length=min_length, rules=rules),
        is_pangram=is_pangram(w, allowed_set, rules=rules),
    )


def is_valid_word(word: str, required: str, extra: str,
                  min_length: int = DEFAULT_RULES.min_length) -> bool:
    """
    Boolean form of the check, with the puzzle given as center + other letters.

    `extra` need not repeat `required`. Unlike evaluate, there is no cap on
    the number of letters, which makes this handy for ad-hoc checks:

      is_valid_word("tote", "t", "elom") -> True
      is_valid_word("dote", "t", "elom") -> False
    """
    if not all(isinstance(x, str) for x in (word, required, extra)) or len(required) != 1:
        return False
    allowed = normalize_letters(extra) | {required.lower()}
    w = word.lower()
    return (
            len(w) >= min_length
            and required.lower() in w
            and all(ch in allowed for ch in w)
    )
