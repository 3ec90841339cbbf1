"""Random sampling without replacement."""

import random
from collections.abc import Sequence
from typing import TypeVar

from triviaboard.errors import SampleSizeError

T = TypeVar("T")


def sample_without_replacement(
    items: Sequence[T],
    count: int,
    rng: random.Random | None = None,
) -> list[T]:
    """Pick ``count`` items uniformly at random, never the same position twice.

    Args:
        items: Collection to draw from
        count: Number of items to return
        rng: Optional random source (seed it for reproducible boards)

    Returns:
        List of ``count`` items in random order

    Raises:
        SampleSizeError: If ``count`` exceeds the number of items
        ValueError: If ``count`` is negative
    """
    if count < 0:
        raise ValueError(f"Sample count must be non-negative, got {count}")
    if count > len(items):
        raise SampleSizeError(count, len(items))

    return (rng or random).sample(list(items), count)
