"""Game endpoints: start a board, view it, and reveal clues."""

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from triviaboard.api.deps import GameSessionDep
from triviaboard.errors import (
    GameLoadingError,
    GameNotReadyError,
    InvalidCoordinateError,
    SampleSizeError,
    UpstreamError,
)
from triviaboard.models.board import Board, ClueCoordinate, RevealState
from triviaboard.services.game import RevealResult

logger = logging.getLogger(__name__)

router = APIRouter()


class ClueResponse(BaseModel):
    """One board cell. Text is only present once revealed."""

    category_index: int
    clue_index: int
    reveal_state: RevealState
    text: str | None = None


class CategoryResponse(BaseModel):
    """A board column."""

    title: str
    clues: list[ClueResponse]


class BoardResponse(BaseModel):
    """The whole board as the player currently sees it."""

    category_count: int
    clue_count: int
    complete: bool
    categories: list[CategoryResponse]


class RevealRequest(BaseModel):
    """Click on a clue cell."""

    category_index: int = Field(ge=0)
    clue_index: int = Field(ge=0)


class RevealResponse(BaseModel):
    """Result of a click on a clue cell."""

    category_index: int
    clue_index: int
    reveal_state: RevealState
    text: str | None
    changed: bool


def board_response(board: Board) -> BoardResponse:
    """Build the player's view of a board without leaking hidden text."""
    return BoardResponse(
        category_count=board.category_count,
        clue_count=board.clue_count,
        complete=board.is_complete(),
        categories=[
            CategoryResponse(
                title=category.title,
                clues=[
                    ClueResponse(
                        category_index=category_index,
                        clue_index=clue_index,
                        reveal_state=clue.reveal_state,
                        text=clue.revealed_text,
                    )
                    for clue_index, clue in enumerate(category.clues)
                ],
            )
            for category_index, category in enumerate(board.categories)
        ],
    )


def reveal_response(result: RevealResult) -> RevealResponse:
    return RevealResponse(
        category_index=result.coordinate.category_index,
        clue_index=result.coordinate.clue_index,
        reveal_state=result.state,
        text=result.text,
        changed=result.changed,
    )


@router.post("", response_model=BoardResponse)
async def start_game(game: GameSessionDep):
    """Start (or restart) a game with a freshly sampled board.

    Returns 409 if a board is already loading and 502 if the trivia API
    failed or did not have enough categories or clues.
    """
    try:
        board = await game.start_game()
    except GameLoadingError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except (UpstreamError, SampleSizeError) as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Could not load a board: {e}",
        ) from e

    return board_response(board)


@router.get("", response_model=BoardResponse)
async def get_game(game: GameSessionDep):
    """Get the current board."""
    try:
        board = game.current_board()
    except GameLoadingError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except GameNotReadyError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return board_response(board)


@router.post("/reveal", response_model=RevealResponse)
async def reveal_clue(body: RevealRequest, game: GameSessionDep):
    """Click a clue: show its question, then its answer, then nothing."""
    coordinate = ClueCoordinate(body.category_index, body.clue_index)
    try:
        result = game.reveal(coordinate)
    except GameLoadingError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    except GameNotReadyError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except InvalidCoordinateError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e

    return reveal_response(result)
