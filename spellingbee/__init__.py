"""Spelling Bee solver: find, score and rank every answer to a puzzle."""

__version__ = "0.1.0"
