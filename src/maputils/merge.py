import logging
from collections.abc import Mapping
from typing import TypeVar

from .protocols import ConflictResolver

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


def merge(
    resolver: ConflictResolver[V], *mappings: Mapping[K, V] | None
) -> dict[K, V]:
    """
    Merge several mappings into a single new dictionary.

    Mappings are folded left to right. The first occurrence of a key is
    inserted as is; every later occurrence calls
    ``resolver(existing, incoming)`` and stores its result. ``None`` sources
    are skipped and the inputs are never modified.

    Args:
        resolver: Callable deciding which value wins on a key collision.
        *mappings: Source mappings, in precedence order.

    Returns:
        A new dictionary holding the union of all keys.

    Example:
        >>> merge(lambda a, b: a + b, {"a": 1, "b": 2}, {"a": 10})
        {'a': 11, 'b': 2}
    """
    merged: dict[K, V] = {}
    collisions = 0
    sources = [source for source in mappings if source is not None]

    for source in sources:
        for key, value in source.items():
            if key in merged:
                merged[key] = resolver(merged[key], value)
                collisions += 1
            else:
                merged[key] = value

    logger.debug(
        f"Merged {len(sources)} mapping(s) into {len(merged)} key(s) "
        f"with {collisions} collision(s)"
    )
    return merged
