"""
In-place helpers for mutable mappings, plus cloning and equality.

None of these functions lock anything: callers sharing a mapping between
threads must synchronize around them.
"""

import copy
from collections.abc import Mapping, MutableMapping
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V")
M = TypeVar("M", bound=Mapping)

_ABSENT = object()


def set_if_present(mapping: MutableMapping[K, V], key: K, value: V) -> bool:
    """
    Overwrite the value for ``key`` only if the key already exists.

    Returns:
        True if the value was written, False otherwise.
    """
    if key in mapping:
        mapping[key] = value
        return True
    return False


def set_if_absent(mapping: MutableMapping[K, V], key: K, value: V) -> bool:
    """
    Insert ``value`` for ``key`` only if the key does not exist yet.

    Returns:
        True if the value was written, False otherwise.
    """
    if key not in mapping:
        mapping[key] = value
        return True
    return False


def clear(mapping: MutableMapping[K, V]) -> None:
    """Remove all entries, keeping the same mapping instance."""
    mapping.clear()


def clone(mapping: M | None) -> M | None:
    """
    Return a shallow copy of the mapping, of the same type.

    Values are shared with the original, not deep-copied. ``None`` is returned
    unchanged, which keeps it distinct from an empty mapping.
    """
    if mapping is None:
        return None
    return copy.copy(mapping)


def copy_into(src: Mapping[K, V] | None, dst: MutableMapping[K, V]) -> None:
    """
    Write every entry of ``src`` into ``dst``, overwriting colliding keys.

    A ``None`` source copies nothing.
    """
    if src is None:
        return
    for key, value in src.items():
        dst[key] = value


def equal(m1: Mapping[K, V] | None, m2: Mapping[K, V] | None) -> bool:
    """
    Tell whether two mappings hold the same keys with equal values.

    ``None`` compares like an empty mapping.
    """
    m1 = m1 if m1 is not None else {}
    m2 = m2 if m2 is not None else {}
    if len(m1) != len(m2):
        return False
    for key, value in m1.items():
        other = m2.get(key, _ABSENT)
        if other is _ABSENT or value != other:
            return False
    return True
