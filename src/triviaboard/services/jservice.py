"""jService trivia API client.

Read-only, unauthenticated JSON endpoints:

- ``GET /categories?count=N`` returns a page of the category catalog
- ``GET /category?id=ID`` returns one category with every clue in it
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from triviaboard.config import settings
from triviaboard.errors import UpstreamError

logger = logging.getLogger(__name__)

JSERVICE_USER_AGENT = "TriviaBoard/0.1 (+https://github.com/triviaboard)"

# Shared httpx client headers
JSERVICE_HEADERS = {"User-Agent": JSERVICE_USER_AGENT, "Accept": "application/json"}


@dataclass
class CategoryInfo:
    """Catalog entry for a category."""

    id: int
    title: str
    clue_count: int


@dataclass
class RawClue:
    """Clue as delivered by the API, reduced to the fields the board uses."""

    question: str
    answer: str


@dataclass
class CategoryDetail:
    """A category with its full clue set."""

    id: int
    title: str
    clues: list[RawClue] = field(default_factory=list)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _parse_category_info(data: dict[str, Any]) -> CategoryInfo:
    return CategoryInfo(
        id=int(data["id"]),
        title=_text(data.get("title")),
        clue_count=int(data.get("clues_count") or 0),
    )


def _parse_category_detail(data: dict[str, Any]) -> CategoryDetail:
    clues = [
        RawClue(question=_text(c.get("question")), answer=_text(c.get("answer")))
        for c in data.get("clues") or []
    ]
    return CategoryDetail(
        id=int(data["id"]),
        title=_text(data.get("title")),
        clues=clues,
    )


class JServiceClient:
    """Async client for a jService-compatible trivia API.

    Use as an async context manager, or call ``aclose()`` when finished.
    Pass ``transport`` to route requests somewhere other than the network
    (e.g. ``httpx.MockTransport`` in tests).

    No retries: transport and HTTP errors surface as ``UpstreamError``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.jservice_url).rstrip("/")
        self._client = httpx.AsyncClient(
            headers=JSERVICE_HEADERS,
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "JServiceClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        url = f"{self.base_url}/{path}"
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Trivia API {path} returned {e.response.status_code}")
            raise UpstreamError(
                f"Trivia API {path} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Trivia API {path} request failed: {e!r}")
            raise UpstreamError(f"Trivia API {path} request failed: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"Trivia API {path} returned invalid JSON") from e

    async def list_categories(self, limit: int) -> list[CategoryInfo]:
        """Fetch up to ``limit`` entries of the category catalog.

        Args:
            limit: Number of candidate categories to request

        Returns:
            List of CategoryInfo in the order the API returned them
        """
        data = await self._get_json("categories", {"count": limit})
        if not isinstance(data, list):
            raise UpstreamError("Trivia API categories response is not a list")

        try:
            categories = [_parse_category_info(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError(f"Malformed category in catalog: {e!r}") from e

        logger.debug(f"Fetched {len(categories)} catalog categories")
        return categories

    async def get_category(self, category_id: int) -> CategoryDetail:
        """Fetch one category with its full clue set.

        Args:
            category_id: Catalog id of the category

        Returns:
            CategoryDetail with every clue the API knows for it
        """
        data = await self._get_json("category", {"id": category_id})
        if not isinstance(data, dict):
            raise UpstreamError(f"Trivia API category {category_id} response is not an object")

        try:
            detail = _parse_category_detail(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise UpstreamError(f"Malformed category {category_id}: {e!r}") from e

        logger.debug(f"Fetched category {category_id} ({detail.title!r}) with {len(detail.clues)} clues")
        return detail
