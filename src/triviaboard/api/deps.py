"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from triviaboard.services.game import GameSession
from triviaboard.services.jservice import JServiceClient


def get_jservice_client(request: Request) -> JServiceClient:
    """Get the trivia API client created in the app lifespan."""
    return request.app.state.jservice


def get_game_session(request: Request) -> GameSession:
    """Get the game session created in the app lifespan."""
    return request.app.state.game


# Type aliases for common dependencies
JServiceDep = Annotated[JServiceClient, Depends(get_jservice_client)]
GameSessionDep = Annotated[GameSession, Depends(get_game_session)]
