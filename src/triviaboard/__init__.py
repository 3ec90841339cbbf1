"""Jeopardy-style trivia board."""

__version__ = "0.1.0"
