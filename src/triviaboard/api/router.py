"""Main API router that aggregates all route modules."""

from fastapi import APIRouter

from triviaboard.api import categories, game, health

api_router = APIRouter()

# Include all route modules
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(game.router, prefix="/game", tags=["game"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
