"""Ready-made conflict resolvers for ``merge``."""

from typing import TypeVar

from .protocols import ConflictResolver

V = TypeVar("V")


def overwrite_resolver() -> ConflictResolver[V]:
    """Return a resolver that always keeps the incoming (right-hand) value."""

    def resolve(existing: V, incoming: V) -> V:
        return incoming

    return resolve


def nop_resolver() -> ConflictResolver[V]:
    """Return a resolver that always keeps the existing (left-hand) value."""

    def resolve(existing: V, incoming: V) -> V:
        return existing

    return resolve
