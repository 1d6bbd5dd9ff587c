from pathlib import Path

import pytest
from spellingbee.datasets import (SourceReadError, iter_words, pretty_summary, read_lines,
                                  validate_wordlist)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["robot", "boot", "tropic", "cab"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True
    assert rep["exists"] is True
    assert rep["count"] == 4
    assert rep["short_words"] == 1
    assert rep["invalid_lines"] == 0
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=4" in s and s.endswith("OK")


def test_validate_wordlist_flags_invalid_and_duplicates(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("Robot\nrobot\nit's\n\n1234\nboot\n", encoding="utf-8")

    rep = validate_wordlist(str(words))
    assert rep["passed"] is True          # still usable
    assert rep["lines"] == 5
    assert rep["invalid_lines"] == 2
    assert rep["unique_count"] == 2
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_nothing_usable(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["a", "an", "cab"])

    rep = validate_wordlist(str(words))
    assert rep["passed"] is False
    assert any("0 words" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False
    assert rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_iter_words_strips_and_skips_blanks(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("  robot \n\nboot\r\n", encoding="utf-8")
    assert list(iter_words(words)) == ["robot", "boot"]


def test_iter_words_missing_file_raises_eagerly(tmp_path: Path):
    with pytest.raises(SourceReadError):
        iter_words(tmp_path / "nope.txt")


def test_read_lines_missing_file(tmp_path: Path):
    with pytest.raises(SourceReadError):
        read_lines(tmp_path / "nope.txt")


def test_validate_wordlist_unreadable_path(tmp_path: Path):
    rep = validate_wordlist(str(tmp_path))      # a directory
    assert rep["exists"] is True
    assert rep["passed"] is False
    assert any("unreadable" in msg for msg in rep["issues"])
