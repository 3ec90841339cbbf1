"""Render collaborator protocol.

The game session reports loading and reveal events through this
interface. Concrete renderers (HTTP views, the terminal UI) decide how to
draw them.
"""

import logging
from typing import Protocol

from triviaboard.models.board import Board, ClueCoordinate

logger = logging.getLogger(__name__)


class BoardRenderer(Protocol):
    """Receives board lifecycle and reveal events from a GameSession."""

    def on_load_start(self) -> None: ...

    def on_load_end(self) -> None: ...

    def on_load_failed(self, error: Exception) -> None: ...

    def on_board_ready(self, board: Board) -> None: ...

    def on_clue_revealed(self, coordinate: ClueCoordinate, text: str) -> None: ...


class LoggingRenderer:
    """Renderer that only logs events. Used when nothing draws the board."""

    def on_load_start(self) -> None:
        logger.debug("Board loading")

    def on_load_end(self) -> None:
        logger.debug("Board loading finished")

    def on_load_failed(self, error: Exception) -> None:
        logger.error(f"Board loading failed: {error}")

    def on_board_ready(self, board: Board) -> None:
        logger.info(f"Board ready with {board.category_count} categories")

    def on_clue_revealed(self, coordinate: ClueCoordinate, text: str) -> None:
        logger.debug(f"Clue {coordinate} revealed")
