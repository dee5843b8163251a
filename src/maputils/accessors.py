"""Read-only helpers for extracting keys, values and entries from mappings."""

import logging
from collections.abc import Mapping
from typing import TypeVar

from .exceptions import MissingKeyError
from .models import Entry

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

_ABSENT = object()


def keys(mapping: Mapping[K, V] | None) -> list[K]:
    """Return all keys of the mapping, in no particular order."""
    if mapping is None:
        return []
    return list(mapping.keys())


def values(mapping: Mapping[K, V] | None) -> list[V]:
    """Return all values of the mapping, in no particular order."""
    if mapping is None:
        return []
    return list(mapping.values())


def entries(mapping: Mapping[K, V] | None) -> list[Entry[K, V]]:
    """
    Return every pair of the mapping as an ``Entry``.

    The order is unspecified. A ``None`` or empty mapping gives an empty list.
    """
    if mapping is None:
        return []
    return [Entry(key=key, value=value) for key, value in mapping.items()]


def get_or_default(mapping: Mapping[K, V] | None, key: K, default: V) -> V:
    """Return the value stored under ``key``, or ``default`` when absent."""
    if mapping is None:
        return default
    value = mapping.get(key, _ABSENT)
    if value is _ABSENT:
        return default
    return value


def get_or_raise(mapping: Mapping[K, V] | None, key: K) -> V:
    """
    Return the value stored under ``key``.

    Use this only where the key must exist: a missing key is a bug in the
    caller and raises ``MissingKeyError``.

    Raises:
        MissingKeyError: If ``key`` is not in the mapping, or the mapping is
            ``None``.
    """
    value = mapping.get(key, _ABSENT) if mapping is not None else _ABSENT
    if value is _ABSENT:
        logger.error(f"Required key {key!r} is missing from mapping")
        raise MissingKeyError(key)
    return value
