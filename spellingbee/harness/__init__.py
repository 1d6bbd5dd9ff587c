from .core import run_puzzle, run_batch, read_puzzles
from .io import write_csv, write_manifest
from .report import format_report

__all__ = ["run_puzzle", "run_batch", "read_puzzles", "write_csv", "write_manifest",
           "format_report"]
