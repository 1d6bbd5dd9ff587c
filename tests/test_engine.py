import pytest
from spellingbee.engine import (Answer, ConfigurationError, Puzzle, Rules, evaluate,
                                is_pangram, is_valid_word, score_word)

ALLOWED = set("cbiprto")  # required 'o'


# --- golden cases: required 'o', letters c b i p r t o ---
@pytest.mark.parametrize("word,expected", [
    ("loon", None),                                 # 'l' not allowed
    ("robot", Answer("robot", 5, False)),
    ("boot", Answer("boot", 1, False)),
    ("tropicb", Answer("tropicb", 14, True)),
    ("brit", None),                                 # no 'o'
    ("bot", None),                                  # too short
    ("", None),
    ("rob0t", None),
    ("ro-bot", None),
    ("robot ", None),
])
def test_evaluate_golden(word, expected):
    assert evaluate("o", ALLOWED, word) == expected


def test_evaluate_is_case_insensitive():
    a = evaluate("O", set("UNRLAPO"), "loon")
    b = evaluate("o", set("unrlapo"), "LOON")
    assert a == b == Answer("loon", 1, False)


def test_evaluate_accepts_letter_string():
    assert evaluate("o", "bciprto", "Robot") == evaluate("o", ALLOWED, "robot")


def test_pangram_bonus_applied_once():
    once = evaluate("o", ALLOWED, "tropicb")
    repeated = evaluate("o", ALLOWED, "tropicbbbooo")
    assert once.is_pangram and repeated.is_pangram
    assert once.score == 7 + 7
    assert repeated.score == 12 + 7


def test_score_monotonic_for_non_pangrams():
    words = ["boot", "robot", "robotr", "robotto", "otttrobb"]
    scores = [evaluate("o", ALLOWED, w).score for w in words]
    assert all(s >= 1 for s in scores)
    assert scores == sorted(scores) and len(set(scores)) == len(scores)


@pytest.mark.parametrize("required,allowed", [
    ("z", ALLOWED),            # required not in allowed
    ("oo", ALLOWED),           # not a single letter
    (None, ALLOWED),
    ("o", set()),
    ("o", set("abcdefgho")),   # too many letters
    ("1", set("1bciprt")),     # non-letter in the puzzle
    ("o", 42),
])
def test_evaluate_malformed_config_matches_nothing(required, allowed):
    assert evaluate(required, allowed, "robot") is None


def test_evaluate_non_string_word():
    assert evaluate("o", ALLOWED, None) is None
    assert evaluate("o", ALLOWED, 1234) is None


def test_min_length_is_configurable():
    assert evaluate("o", ALLOWED, "bot", min_length=3) == Answer("bot", 1, False)
    assert evaluate("o", ALLOWED, "boot", min_length=5) is None
    assert evaluate("o", ALLOWED, "robot", min_length=5).score == 1


def test_custom_rules():
    rules = Rules(pangram_bonus=3, short_word_points=2)
    assert evaluate("o", ALLOWED, "boot", rules=rules).score == 2
    assert evaluate("o", ALLOWED, "tropicb", rules=rules).score == 10


def test_no_pangram_in_partial_puzzle():
    # five letters only: covering all of them is not a pangram
    ans = evaluate("t", "telom", "motel")
    assert ans == Answer("motel", 5, False)
    assert is_pangram("motel", set("telom")) is False


def test_score_word_and_is_pangram():
    assert score_word("boot", ALLOWED) == 1
    assert score_word("robot", ALLOWED) == 5
    assert score_word("tropicb", ALLOWED) == 14
    assert is_pangram("tropicb", ALLOWED) is True
    assert is_pangram("robot", ALLOWED) is False


# --- boolean predicate, center + extra letters ---
@pytest.mark.parametrize("word,required,extra,expected", [
    ("", "c", "ab", False),
    ("cab", "c", "ab", False),
    ("tttt", "t", "oe", True),
    ("tttttt", "t", "oe", True),
    ("oeoe", "t", "oe", False),
    ("tote", "t", "elom", True),
    ("molet", "t", "elom", True),
    ("dote", "t", "elom", False),
    ("note", "t", "elom", False),
    ("TOTE", "t", "ELOM", True),
])
def test_is_valid_word(word, required, extra, expected):
    assert is_valid_word(word, required, extra) is expected


# --- puzzle construction ---
def test_puzzle_from_letters():
    pz = Puzzle.from_letters("O", "BCIPRT")
    assert pz.required == "o"
    assert pz.allowed == frozenset("bciprto")
    assert pz.extra == "bciprt"
    assert pz.letters == "o:bciprt"


def test_puzzle_duplicates_collapse():
    pz = Puzzle.from_letters("o", "ooccbb")
    assert pz.allowed == frozenset("ocb")


@pytest.mark.parametrize("required,extra", [
    ("", "bciprt"),
    ("ob", "ciprt"),
    ("1", "bciprt"),
    ("o", "bcip-t"),
    ("o", "bciprtx"),   # 8 distinct letters
])
def test_puzzle_rejects_bad_letters(required, extra):
    with pytest.raises(ConfigurationError):
        Puzzle.from_letters(required, extra)


def test_rules_validate_constants():
    with pytest.raises(ConfigurationError):
        Rules(min_length=0)
    with pytest.raises(ConfigurationError):
        Rules(pangram_bonus=-1)
    with pytest.raises(ConfigurationError):
        Rules(short_word_points=5)       # would outscore a 5-letter word
    assert Rules(min_length=5, short_word_points=5).short_word_points == 5


def test_score_monotonic_with_max_short_word_points():
    rules = Rules(short_word_points=4)
    scores = [evaluate("o", ALLOWED, w, rules=rules).score for w in ["boot", "robot"]]
    assert scores == [4, 5]


def test_puzzle_rejects_letter_with_multichar_lowercase():
    # "İ".lower() is two code points
    with pytest.raises(ConfigurationError):
        Puzzle.from_letters("İ", "bcdef")
    with pytest.raises(ConfigurationError):
        Puzzle.from_letters("b", "İcdef")


@pytest.mark.parametrize("required,allowed", [
    ("z", frozenset("abc")),    # required not in allowed
    ("A", frozenset("abc")),    # not normalized
    ("a", frozenset("aB")),
    ("a", frozenset(["a", "1"])),
    ("ab", frozenset("ab")),
])
def test_puzzle_direct_construction_is_checked(required, allowed):
    with pytest.raises(ConfigurationError):
        Puzzle(required=required, allowed=allowed)


def test_puzzle_direct_construction_freezes_allowed():
    pz = Puzzle(required="o", allowed={"o", "b"})
    assert pz.allowed == frozenset("ob")
    assert isinstance(pz.allowed, frozenset)
