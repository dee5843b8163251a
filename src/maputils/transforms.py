"""
Transformations from one mapping to a new mapping or list.

Every function makes a single pass over the input entries and never modifies
the input. A ``None`` input is read as an empty mapping. Where two entries
produce the same output key, whichever entry is processed later wins; callers
needing a deterministic result must make sure output keys are unique.
"""

from collections.abc import Callable, Hashable, Mapping
from typing import TypeVar

from .protocols import EntryAction, EntryMapper, Predicate

K = TypeVar("K")
V = TypeVar("V")
K2 = TypeVar("K2")
V2 = TypeVar("V2")
R = TypeVar("R")
HV = TypeVar("HV", bound=Hashable)


def _items(mapping: Mapping[K, V] | None):
    return mapping.items() if mapping is not None else ()


def filter_entries(
    mapping: Mapping[K, V] | None, predicate: Predicate[K, V]
) -> dict[K, V]:
    """Return a new dictionary holding the entries that satisfy ``predicate``."""
    return {key: value for key, value in _items(mapping) if predicate(key, value)}


def take_if(
    mapping: Mapping[K, V] | None,
    predicate: Predicate[K, V],
    action: EntryAction[K, V],
) -> None:
    """
    Pass every entry that satisfies ``predicate`` to ``action``.

    Behaves like ``filter_entries`` without building the filtered mapping.
    """
    for key, value in _items(mapping):
        if predicate(key, value):
            action(key, value)


def map_entries(
    mapping: Mapping[K, V] | None, mapper: EntryMapper[K, V, K2, V2]
) -> dict[K2, V2]:
    """Build a new dictionary from the ``(key, value)`` pairs ``mapper`` returns."""
    result: dict[K2, V2] = {}
    for key, value in _items(mapping):
        new_key, new_value = mapper(key, value)
        result[new_key] = new_value
    return result


def map_to_list(
    mapping: Mapping[K, V] | None, mapper: Callable[[K, V], R]
) -> list[R]:
    """Collect ``mapper(key, value)`` for every entry, in no particular order."""
    return [mapper(key, value) for key, value in _items(mapping)]


def invert(mapping: Mapping[K, HV] | None) -> dict[HV, K]:
    """
    Swap keys and values.

    Values must be hashable. Duplicated values collapse into a single entry.
    """
    return {value: key for key, value in _items(mapping)}
