from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List

log = logging.getLogger(__name__)

# Unix word list; override with -d on the CLI.
DEFAULT_DICT_PATH = "/usr/share/dict/words"


class SourceReadError(OSError):
    """The word list is missing or can't be read as UTF-8 text."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises SourceReadError if the file is missing or unreadable.
    """
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"cannot read {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def iter_words(p: Path | str = DEFAULT_DICT_PATH) -> Iterator[str]:
    """
    Stream one word per line from `p`, stripped, skipping blank lines.

    The file is opened eagerly so a bad path fails here rather than on first
    iteration. Raises SourceReadError.
    """
    p = Path(p)
    try:
        f = p.open("r", encoding="utf-8")
    except OSError as e:
        raise SourceReadError(f"cannot open {p}: {e}") from e
    log.debug("reading words from %s", p)
    return _lines(f, p)


def _lines(f, p: Path) -> Iterator[str]:
    with f:
        try:
            for raw in f:
                w = raw.strip()
                if w:
                    yield w
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"error reading {p}: {e}") from e


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
