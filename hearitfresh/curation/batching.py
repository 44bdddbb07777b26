"""
Batch splitting against Spotify request-size limits.

Spotify caps how many ids a single request may carry (20 albums per
get_albums, 100 tracks per playlist addition). Callers split their id
lists with split() and issue one request per chunk.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")


def split(items: Sequence[T], max_batch_size: int) -> list[list[T]]:
    """
    Partition items into contiguous chunks of at most max_batch_size.

    Args:
        items: Ordered items to split.
        max_batch_size: Chunk size ceiling, must be positive.

    Returns:
        Chunks in input order; only the last one may be shorter.
        An empty input gives an empty list, not one empty chunk.

    Raises:
        ValueError: If max_batch_size is not positive.

    Example:
        >>> split(["a", "b", "c"], 2)
        [['a', 'b'], ['c']]
    """
    if max_batch_size <= 0:
        raise ValueError(f"max_batch_size must be positive, got {max_batch_size}")

    return [
        list(items[i:i + max_batch_size])
        for i in range(0, len(items), max_batch_size)
    ]
