"""
Puzzle configuration for a Spelling Bee game.

A puzzle is one required (center) letter plus the set of letters that may
appear in an answer. The required letter is always a member of that set.

Conventions:
  - letters are case-insensitive and canonicalized to lowercase
  - duplicate letters collapse ("aab" -> {a, b})
  - the NYT game uses 7 letters and a 4-letter minimum; both live in Rules

Puzzle.from_letters is the only place that raises ConfigurationError. The
evaluator and scanner never raise for a bad configuration, they just match
nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable


class ConfigurationError(ValueError):
    """Puzzle letters or rule constants that cannot form a valid game."""


@dataclass(frozen=True)
class Rules:
    """Game constants (NYT defaults)."""
    min_length: int = 4         # shortest accepted answer
    letter_count: int = 7       # letters in a full puzzle
    short_word_points: int = 1  # score for an answer of exactly min_length
    pangram_bonus: int = 7      # added once when an answer uses every letter

    def __post_init__(self) -> None:
        for name in ("min_length", "letter_count", "short_word_points"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer; got {value!r}")
        if not isinstance(self.pangram_bonus, int) or self.pangram_bonus < 0:
            raise ConfigurationError(f"pangram_bonus must be >= 0; got {self.pangram_bonus!r}")
        # a min_length answer must score below a min_length + 1 answer
        if self.short_word_points > self.min_length:
            raise ConfigurationError(
                f"short_word_points must be <= min_length ({self.min_length}); "
                f"got {self.short_word_points}"
            )


DEFAULT_RULES = Rules()


def normalize_letters(letters: Iterable[str]) -> FrozenSet[str]:
    """Lowercase and dedupe; accepts a string or any iterable of letters."""
    return frozenset(ch.lower() for ch in letters)


def _is_letter(ch) -> bool:
    """One alphabetic character that stays one character when lowercased."""
    return isinstance(ch, str) and len(ch) == 1 and ch.isalpha() and len(ch.lower()) == 1


@dataclass(frozen=True)
class Puzzle:
    """
    Required letter + allowed set, both lowercase.

    Direct construction is checked too: the required letter must be a
    lowercase letter inside `allowed`, and `allowed` may hold only lowercase
    letters. The letter-count cap depends on Rules, so only from_letters
    enforces it.
    """
    required: str
    allowed: FrozenSet[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "allowed", frozenset(self.allowed))
        if not _is_letter(self.required) or self.required != self.required.lower():
            raise ConfigurationError(f"required must be a lowercase letter; got {self.required!r}")
        bad = sorted((ch for ch in self.allowed if not (_is_letter(ch) and ch == ch.lower())), key=repr)
        if bad:
            raise ConfigurationError(f"allowed must hold lowercase letters only; found {bad}")
        if self.required not in self.allowed:
            raise ConfigurationError(f"required letter {self.required!r} is not in allowed letters")

    @classmethod
    def from_letters(cls, required: str, extra: str, rules: Rules = DEFAULT_RULES) -> "Puzzle":
        """
        Build a puzzle from the center letter and the other letters.

        `extra` may or may not repeat the required letter. Raises
        ConfigurationError if `required` is not exactly one letter, if `extra`
        holds anything but letters, or if the distinct letter count exceeds
        rules.letter_count.
        """
        if not _is_letter(required):
            raise ConfigurationError(f"required letter must be a single letter; got {required!r}")
        if not isinstance(extra, str):
            raise ConfigurationError(f"extra letters must be a string; got {extra!r}")

        bad = sorted({ch for ch in extra if not _is_letter(ch)})
        if bad:
            raise ConfigurationError(f"extra letters must be alphabetic; found {bad}")

        req = required.lower()
        allowed = normalize_letters(extra) | {req}
        if len(allowed) > rules.letter_count:
            raise ConfigurationError(
                f"a puzzle has at most {rules.letter_count} distinct letters; got {len(allowed)}"
            )
        return cls(required=req, allowed=allowed)

    @property
    def extra(self) -> str:
        """Non-required letters, sorted."""
        return "".join(sorted(self.allowed - {self.required}))

    @property
    def letters(self) -> str:
        """Display form: required letter first, e.g. 'o:bciprt'."""
        return f"{self.required}:{self.extra}"
