"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator
from typing import Any

# Set test environment before importing app
os.environ["ENVIRONMENT"] = "test"

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from triviaboard.api.deps import get_game_session, get_jservice_client
from triviaboard.config import Settings
from triviaboard.main import app
from triviaboard.services.game import GameSession
from triviaboard.services.jservice import JServiceClient

TEST_API_URL = "http://jservice.test/api"


class FakeJService:
    """In-memory jService served through ``httpx.MockTransport``.

    Categories are keyed by id; each holds a title and a list of
    ``(question, answer)`` pairs. Responses carry the extra fields the real
    API sends so parsing is exercised against realistic payloads.

    Usage:
        fake = FakeJService.with_categories(10, 8)
        client = fake.client()
    """

    def __init__(self, categories: dict[int, tuple[str, list[tuple[str, str]]]] | None = None):
        self.categories = categories or {}
        self.requests: list[httpx.Request] = []
        self.failing_paths: set[str] = set()

    @classmethod
    def with_categories(cls, count: int, clues_per_category: int) -> "FakeJService":
        """Build categories titled C0..C<n> with clues Q<c>.<i>/A<c>.<i>."""
        return cls(
            {
                100 + c: (
                    f"C{c}",
                    [(f"Q{c}.{i}", f"A{c}.{i}") for i in range(clues_per_category)],
                )
                for c in range(count)
            }
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.rsplit("/", 1)[-1]

        if path in self.failing_paths:
            return httpx.Response(500, json={"error": "boom"})

        if path == "categories":
            count = int(request.url.params.get("count", "1"))
            return httpx.Response(
                200,
                json=[
                    {"id": cid, "title": title, "clues_count": len(clues)}
                    for cid, (title, clues) in list(self.categories.items())[:count]
                ],
            )

        if path == "category":
            cid = int(request.url.params["id"])
            if cid not in self.categories:
                return httpx.Response(404, json={"error": "not found"})
            title, clues = self.categories[cid]
            return httpx.Response(
                200,
                json={
                    "id": cid,
                    "title": title,
                    "clues_count": len(clues),
                    "clues": [
                        {
                            "id": cid * 1000 + i,
                            "question": question,
                            "answer": answer,
                            "value": 200 * (i + 1),
                            "airdate": "2004-12-31T12:00:00.000Z",
                            "category_id": cid,
                        }
                        for i, (question, answer) in enumerate(clues)
                    ],
                },
            )

        return httpx.Response(404)

    def client(self) -> JServiceClient:
        return JServiceClient(base_url=TEST_API_URL, transport=httpx.MockTransport(self.handler))

    def paths(self) -> list[str]:
        """Requested endpoint names, in order."""
        return [r.url.path.rsplit("/", 1)[-1] for r in self.requests]


class RecordingRenderer:
    """Renderer that records every event it receives."""

    def __init__(self):
        self.events: list[tuple[str, Any]] = []

    def on_load_start(self) -> None:
        self.events.append(("load_start", None))

    def on_load_end(self) -> None:
        self.events.append(("load_end", None))

    def on_load_failed(self, error: Exception) -> None:
        self.events.append(("load_failed", error))

    def on_board_ready(self, board) -> None:
        self.events.append(("board_ready", board))

    def on_clue_revealed(self, coordinate, text: str) -> None:
        self.events.append(("clue_revealed", (coordinate, text)))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def fake_jservice() -> FakeJService:
    """Ten categories C0..C9, eight clues each."""
    return FakeJService.with_categories(10, 8)


@pytest.fixture
async def jservice_client(fake_jservice: FakeJService) -> AsyncGenerator[JServiceClient, None]:
    """Trivia API client wired to the fake service."""
    client = fake_jservice.client()
    yield client
    await client.aclose()


@pytest.fixture
def test_settings() -> Settings:
    """Board shape matching the classic 6x5 layout."""
    return Settings(
        environment="test",
        category_count=6,
        clues_per_category=5,
        catalog_size=100,
    )


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def game(
    jservice_client: JServiceClient,
    renderer: RecordingRenderer,
    test_settings: Settings,
) -> GameSession:
    """Game session over the fake service."""
    return GameSession(jservice_client, renderer=renderer, settings=test_settings)


@pytest.fixture
async def client(
    game: GameSession,
    jservice_client: JServiceClient,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    app.dependency_overrides[get_game_session] = lambda: game
    app.dependency_overrides[get_jservice_client] = lambda: jservice_client

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
