from .puzzle import Puzzle, Rules, DEFAULT_RULES, ConfigurationError
from .scoring import Answer, score_word, is_pangram
from .validation import evaluate, is_valid_word
from .constraints import ResultSet, scan, solve, iter_answers, find_all

__all__ = [
    "Puzzle", "Rules", "DEFAULT_RULES", "ConfigurationError",
    "Answer", "score_word", "is_pangram",
    "evaluate", "is_valid_word",
    "ResultSet", "scan", "solve", "iter_answers", "find_all",
]
