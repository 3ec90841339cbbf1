"""Board domain models."""

from triviaboard.models.board import Board, Category, Clue, ClueCoordinate, RevealState

__all__ = [
    "Board",
    "Category",
    "Clue",
    "ClueCoordinate",
    "RevealState",
]
