"""Board assembly pipeline: pick categories, then fill each column."""

import asyncio
import logging
import random

from triviaboard.models.board import Board
from triviaboard.services.acquisition import fetch_category, select_category_ids
from triviaboard.services.jservice import JServiceClient

logger = logging.getLogger(__name__)


async def assemble_board(
    client: JServiceClient,
    category_count: int,
    clue_count: int,
    catalog_size: int,
    *,
    parallel: bool = False,
    rng: random.Random | None = None,
) -> Board:
    """Build a fresh board from the trivia API.

    Column order always follows the order the category ids were selected
    in. With ``parallel`` the per-category fetches run concurrently;
    otherwise each is awaited before the next starts.

    Any failure aborts assembly and propagates; no partial board is returned.

    Args:
        client: Trivia API client
        category_count: Number of columns
        clue_count: Number of rows
        catalog_size: Candidate categories to request from the catalog
        parallel: Fetch categories concurrently
        rng: Optional random source

    Returns:
        A rectangular Board with every clue hidden
    """
    category_ids = await select_category_ids(client, category_count, catalog_size, rng=rng)

    # One generator per column, drawn in selection order
    column_rngs = [random.Random(rng.getrandbits(64)) if rng is not None else None for _ in category_ids]

    if parallel:
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(fetch_category(client, category_id, clue_count, rng=column_rng))
                    for category_id, column_rng in zip(category_ids, column_rngs)
                ]
        except ExceptionGroup as eg:
            # Siblings are already cancelled and awaited; surface the first failure
            raise eg.exceptions[0] from None
        categories = [task.result() for task in tasks]
    else:
        categories = [
            await fetch_category(client, category_id, clue_count, rng=column_rng)
            for category_id, column_rng in zip(category_ids, column_rngs)
        ]

    board = Board(categories=categories)
    logger.info(
        f"Assembled {board.category_count}x{board.clue_count} board: "
        f"{', '.join(category.title for category in board.categories)}"
    )
    return board
