"""Game endpoint tests."""

import asyncio
from unittest.mock import patch

import pytest
from httpx import AsyncClient

from tests.conftest import FakeJService
from triviaboard.models.board import Board, Category, Clue
from triviaboard.services.game import GameSession


@pytest.mark.asyncio
async def test_get_game_before_start(client: AsyncClient):
    response = await client.get("/api/game")
    assert response.status_code == 404
    assert response.json()["detail"] == "No game in progress"


@pytest.mark.asyncio
async def test_start_game(client: AsyncClient):
    """Starting a game returns a 6x5 board with no text showing."""
    response = await client.post("/api/game")
    assert response.status_code == 200
    data = response.json()
    assert data["category_count"] == 6
    assert data["clue_count"] == 5
    assert data["complete"] is False
    assert len(data["categories"]) == 6
    assert len({category["title"] for category in data["categories"]}) == 6

    for category_index, category in enumerate(data["categories"]):
        assert len(category["clues"]) == 5
        for clue_index, clue in enumerate(category["clues"]):
            assert clue == {
                "category_index": category_index,
                "clue_index": clue_index,
                "reveal_state": "hidden",
                "text": None,
            }


@pytest.mark.asyncio
async def test_start_game_does_not_leak_answers(client: AsyncClient):
    """Fake questions look like "Q1.2" and answers like "A1.2"."""
    response = await client.post("/api/game")
    assert '"Q' not in response.text
    assert '"A' not in response.text


@pytest.mark.asyncio
async def test_get_game_after_start(client: AsyncClient):
    started = (await client.post("/api/game")).json()
    response = await client.get("/api/game")
    assert response.status_code == 200
    assert response.json() == started


@pytest.mark.asyncio
async def test_reveal_sequence(client: AsyncClient, game: GameSession):
    await client.post("/api/game")
    clue = game.board.categories[1].clues[2]  # type: ignore[union-attr]
    body = {"category_index": 1, "clue_index": 2}

    response = await client.post("/api/game/reveal", json=body)
    assert response.status_code == 200
    assert response.json() == {
        "category_index": 1,
        "clue_index": 2,
        "reveal_state": "question",
        "text": clue.question,
        "changed": True,
    }

    response = await client.post("/api/game/reveal", json=body)
    assert response.json()["reveal_state"] == "answer"
    assert response.json()["text"] == clue.answer
    assert response.json()["changed"] is True

    response = await client.post("/api/game/reveal", json=body)
    assert response.json()["reveal_state"] == "answer"
    assert response.json()["changed"] is False

    board = (await client.get("/api/game")).json()
    cell = board["categories"][1]["clues"][2]
    assert cell["reveal_state"] == "answer"
    assert cell["text"] == clue.answer


@pytest.mark.asyncio
async def test_reveal_before_start(client: AsyncClient):
    response = await client.post("/api/game/reveal", json={"category_index": 0, "clue_index": 0})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_reveal_out_of_bounds(client: AsyncClient):
    await client.post("/api/game")
    response = await client.post("/api/game/reveal", json={"category_index": 6, "clue_index": 0})
    assert response.status_code == 422
    assert "outside" in response.json()["detail"]


@pytest.mark.asyncio
async def test_reveal_negative_index_is_validation_error(client: AsyncClient):
    await client.post("/api/game")
    response = await client.post("/api/game/reveal", json={"category_index": -1, "clue_index": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_start_game_upstream_failure(client: AsyncClient, fake_jservice: FakeJService):
    fake_jservice.failing_paths.add("categories")
    response = await client.post("/api/game")
    assert response.status_code == 502
    assert "Could not load a board" in response.json()["detail"]


@pytest.mark.asyncio
async def test_start_game_insufficient_clues(client: AsyncClient, fake_jservice: FakeJService):
    for category_id, (title, clues) in list(fake_jservice.categories.items()):
        fake_jservice.categories[category_id] = (title, clues[:3])

    response = await client.post("/api/game")
    assert response.status_code == 502
    assert "clues" in response.json()["detail"]

    response = await client.get("/api/game")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_start_game_while_loading(client: AsyncClient, game: GameSession):
    release = asyncio.Event()

    async def slow_assemble(*args, **kwargs):
        await release.wait()
        return Board(categories=[Category(title="T", clues=[Clue("q", "a")])])

    with patch("triviaboard.services.game.assemble_board", side_effect=slow_assemble):
        pending = asyncio.ensure_future(game.start_game())
        await asyncio.sleep(0)

        response = await client.post("/api/game")
        assert response.status_code == 409

        response = await client.get("/api/game")
        assert response.status_code == 409

        release.set()
        await pending

    response = await client.get("/api/game")
    assert response.status_code == 200
    assert response.json()["categories"][0]["title"] == "T"
