"""In-memory board model and per-clue reveal state machine."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from triviaboard.errors import InvalidCoordinateError

# "<category><sep><clue>", where sep is a bare "-", a comma or whitespace
COORDINATE_PATTERN = re.compile(r"\s*(-?\d+)(?:-|\s*,\s*|\s+)(-?\d+)\s*")


class RevealState(str, Enum):
    """How much of a clue has been disclosed."""

    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


class ClueCoordinate(NamedTuple):
    """Address of a single board cell."""

    category_index: int
    clue_index: int

    @classmethod
    def parse(cls, value: str) -> "ClueCoordinate":
        """Parse a ``"<category>-<clue>"`` cell id.

        Whitespace and commas are also accepted as separators so that
        ``"2 3"`` and ``"2,3"`` work from a terminal prompt. A ``-`` only
        separates when it sits directly between the two numbers; anywhere
        else it is a sign, so ``"-1 2"`` parses as ``(-1, 2)`` and is left
        for the board's bounds check to reject.
        """
        match = COORDINATE_PATTERN.fullmatch(value)
        if match is None:
            raise ValueError(f"Invalid clue coordinate: {value!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.category_index}-{self.clue_index}"


@dataclass
class Clue:
    """A question/answer pair and how much of it is showing."""

    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN

    @property
    def revealed_text(self) -> str | None:
        """Text currently visible in the clue's cell, if any."""
        if self.reveal_state == RevealState.QUESTION:
            return self.question
        if self.reveal_state == RevealState.ANSWER:
            return self.answer
        return None

    def advance(self) -> str | None:
        """Move one step along hidden -> question -> answer.

        Returns the newly revealed text, or None when the answer is
        already showing and the click is ignored.
        """
        if self.reveal_state == RevealState.HIDDEN:
            self.reveal_state = RevealState.QUESTION
            return self.question
        if self.reveal_state == RevealState.QUESTION:
            self.reveal_state = RevealState.ANSWER
            return self.answer
        return None


@dataclass
class Category:
    """A titled column of clues."""

    title: str
    clues: list[Clue] = field(default_factory=list)


@dataclass
class Board:
    """Ordered columns of categories, each with the same number of clues."""

    categories: list[Category] = field(default_factory=list)

    def __post_init__(self) -> None:
        counts = {len(category.clues) for category in self.categories}
        if len(counts) > 1:
            raise ValueError(f"Board is not rectangular: clue counts {sorted(counts)}")

    @property
    def category_count(self) -> int:
        return len(self.categories)

    @property
    def clue_count(self) -> int:
        return len(self.categories[0].clues) if self.categories else 0

    def clue_at(self, coordinate: ClueCoordinate) -> Clue:
        """Look up a clue, rejecting out-of-range and negative indexes."""
        category_index, clue_index = coordinate
        if not (0 <= category_index < self.category_count and 0 <= clue_index < self.clue_count):
            raise InvalidCoordinateError(
                f"Clue {coordinate} is outside a {self.category_count}x{self.clue_count} board"
            )
        return self.categories[category_index].clues[clue_index]

    def is_complete(self) -> bool:
        """Check whether every answer on the board has been revealed."""
        return all(
            clue.reveal_state == RevealState.ANSWER
            for category in self.categories
            for clue in category.clues
        )
