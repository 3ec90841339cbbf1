"""Game session: owns the current board and drives the reveal state machine."""

import logging
import random
from dataclasses import dataclass

from triviaboard.config import Settings, settings as default_settings
from triviaboard.errors import GameLoadingError, GameNotReadyError
from triviaboard.models.board import Board, ClueCoordinate, RevealState
from triviaboard.services.board import assemble_board
from triviaboard.services.jservice import JServiceClient
from triviaboard.services.render import BoardRenderer, LoggingRenderer

logger = logging.getLogger(__name__)


@dataclass
class RevealResult:
    """Outcome of clicking a clue."""

    coordinate: ClueCoordinate
    state: RevealState
    text: str | None
    changed: bool


class GameSession:
    """A single player's game: one board at a time, rebuilt on every start.

    Board assemblies are serialized with an in-flight flag. Starting a game
    while another assembly is running raises GameLoadingError rather than
    interleaving two partial boards.
    """

    def __init__(
        self,
        client: JServiceClient,
        renderer: BoardRenderer | None = None,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ):
        self.client = client
        self.renderer: BoardRenderer = renderer or LoggingRenderer()
        self.settings = settings or default_settings
        self.rng = rng
        self._board: Board | None = None
        self._loading = False

    @property
    def board(self) -> Board | None:
        return self._board

    @property
    def is_loading(self) -> bool:
        return self._loading

    async def start_game(self) -> Board:
        """Discard the current board and assemble a new one.

        Returns:
            The new board, also handed to the renderer

        Raises:
            GameLoadingError: If an assembly is already in flight
            UpstreamError: If the trivia API failed
            SampleSizeError: If the API had too few categories or clues
        """
        if self._loading:
            raise GameLoadingError("A board is already being loaded")

        self._loading = True
        self._board = None
        self.renderer.on_load_start()
        try:
            board = await assemble_board(
                self.client,
                self.settings.category_count,
                self.settings.clues_per_category,
                self.settings.catalog_size,
                parallel=self.settings.parallel_fetch,
                rng=self.rng,
            )
        except Exception as e:
            logger.error(f"Game start failed: {e}")
            self.renderer.on_load_failed(e)
            raise
        else:
            self._board = board
            self.renderer.on_board_ready(board)
            return board
        finally:
            self._loading = False
            self.renderer.on_load_end()

    def current_board(self) -> Board:
        """Get the board, failing if none is ready."""
        if self._loading:
            raise GameLoadingError("The board is still loading")
        if self._board is None:
            raise GameNotReadyError("No game in progress")
        return self._board

    def reveal(self, coordinate: ClueCoordinate) -> RevealResult:
        """Handle a click on one clue cell.

        hidden -> question text, question -> answer text, answer -> ignored.
        The renderer is told about the one affected cell only when its
        state changed.

        Raises:
            GameLoadingError: If the board is still loading
            GameNotReadyError: If no board has been assembled
            InvalidCoordinateError: If the coordinate is outside the board
        """
        clue = self.current_board().clue_at(coordinate)
        text = clue.advance()

        if text is None:
            return RevealResult(coordinate, clue.reveal_state, clue.revealed_text, changed=False)

        self.renderer.on_clue_revealed(coordinate, text)
        return RevealResult(coordinate, clue.reveal_state, text, changed=True)
