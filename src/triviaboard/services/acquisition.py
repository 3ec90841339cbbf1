"""Category and clue acquisition from the trivia API."""

import logging
import random

from triviaboard.errors import InsufficientCategoriesError, InsufficientCluesError, SampleSizeError
from triviaboard.models.board import Category, Clue, RevealState
from triviaboard.services.jservice import JServiceClient
from triviaboard.services.sampling import sample_without_replacement

logger = logging.getLogger(__name__)


async def select_category_ids(
    client: JServiceClient,
    count: int,
    catalog_size: int,
    rng: random.Random | None = None,
) -> list[int]:
    """Pick ``count`` distinct category ids from the catalog.

    Args:
        client: Trivia API client
        count: Number of categories the board needs
        catalog_size: Candidates to request; must exceed ``count``
        rng: Optional random source

    Returns:
        List of distinct category ids

    Raises:
        ValueError: If ``catalog_size`` does not exceed ``count``
        InsufficientCategoriesError: If the catalog returned too few entries
        UpstreamError: If the catalog could not be fetched
    """
    if catalog_size <= count:
        raise ValueError(f"catalog_size ({catalog_size}) must exceed count ({count})")

    catalog = await client.list_categories(limit=catalog_size)
    # De-duplicate while keeping catalog order, so sampled ids are distinct
    category_ids = list(dict.fromkeys(category.id for category in catalog))

    try:
        selected = sample_without_replacement(category_ids, count, rng=rng)
    except SampleSizeError as e:
        raise InsufficientCategoriesError(e.requested, e.available) from e

    logger.info(f"Selected categories {selected} from {len(category_ids)} candidates")
    return selected


async def fetch_category(
    client: JServiceClient,
    category_id: int,
    clue_count: int,
    rng: random.Random | None = None,
) -> Category:
    """Fetch a category and sample ``clue_count`` of its clues, all hidden.

    Args:
        client: Trivia API client
        category_id: Catalog id of the category
        clue_count: Number of clues the board column needs
        rng: Optional random source

    Returns:
        Category with exactly ``clue_count`` hidden clues

    Raises:
        InsufficientCluesError: If the category has fewer than ``clue_count`` clues
        UpstreamError: If the category could not be fetched
    """
    detail = await client.get_category(category_id)

    try:
        sampled = sample_without_replacement(detail.clues, clue_count, rng=rng)
    except SampleSizeError as e:
        logger.warning(f"Category {category_id} ({detail.title!r}) has only {e.available} clues")
        raise InsufficientCluesError(category_id, e.requested, e.available) from e

    clues = [
        Clue(question=raw.question, answer=raw.answer, reveal_state=RevealState.HIDDEN)
        for raw in sampled
    ]
    return Category(title=detail.title, clues=clues)
