from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, iter_words, DEFAULT_DICT_PATH, SourceReadError

__all__ = ["validate_wordlist", "pretty_summary", "read_lines", "write_lines", "iter_words",
           "DEFAULT_DICT_PATH", "SourceReadError"]
