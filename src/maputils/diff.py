import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from .models import DiffReason, DiffRenderOptions, EntryComparison
from .render import render_mapping_diff

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

_ABSENT = object()


def diff(
    left: Mapping[K, V] | None,
    right: Mapping[K, V] | None,
    *,
    missing: Any = None,
    render_text: bool = True,
    render_options: DiffRenderOptions | None = None,
) -> dict[K, EntryComparison[V]]:
    """
    Compare two mappings key by key.

    A key is reported when its values differ (``VALUE_MISMATCH``) or when it
    exists on one side only (``MISSING_IN_LEFT`` / ``MISSING_IN_RIGHT``). Keys
    holding equal values on both sides are left out. ``None`` compares like an
    empty mapping.

    Args:
        left: The reference mapping.
        right: The mapping compared against ``left``.
        missing: Placeholder stored for the side a key is absent from.
        render_text: Whether to fill ``EntryComparison.diff`` with the text
            diff of the two whole mappings.
        render_options: Options for the text renderer.

    Returns:
        A dictionary from each differing key to its comparison.
    """
    left = left if left is not None else {}
    right = right if right is not None else {}
    found: dict[K, tuple[Any, Any, DiffReason]] = {}

    for key, value in left.items():
        other = right.get(key, _ABSENT)
        if other is _ABSENT:
            found[key] = (value, missing, DiffReason.MISSING_IN_RIGHT)
        elif value != other:
            found[key] = (value, other, DiffReason.VALUE_MISMATCH)

    for key, value in right.items():
        other = left.get(key, _ABSENT)
        if other is _ABSENT:
            found[key] = (missing, value, DiffReason.MISSING_IN_LEFT)
        elif other != value:
            found[key] = (other, value, DiffReason.VALUE_MISMATCH)

    text = ""
    if found and render_text:
        text = render_mapping_diff(left, right, render_options)

    result: dict[K, EntryComparison[V]] = {
        key: EntryComparison(left=lv, right=rv, diff=text, reason=reason)
        for key, (lv, rv, reason) in found.items()
    }

    logger.debug(
        f"Compared {len(left)} left and {len(right)} right key(s): "
        f"{len(result)} difference(s)"
    )
    return result


def key_diff(
    left: Mapping[K, Any] | None, right: Mapping[K, Any] | None
) -> tuple[set[K], set[K]]:
    """
    Return the keys found on one side only.

    Values are not compared and ``None`` counts as an empty mapping.

    Returns:
        ``(keys only in left, keys only in right)``
    """
    left = left if left is not None else {}
    right = right if right is not None else {}
    left_only = {key for key in left if key not in right}
    right_only = {key for key in right if key not in left}
    return left_only, right_only
