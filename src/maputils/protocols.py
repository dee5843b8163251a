from typing import Protocol, TypeVar

K = TypeVar("K")
V = TypeVar("V")
K_contra = TypeVar("K_contra", contravariant=True)
V_contra = TypeVar("V_contra", contravariant=True)
K2_co = TypeVar("K2_co", covariant=True)
V2_co = TypeVar("V2_co", covariant=True)


class ConflictResolver(Protocol[V]):
    """Defines the contract for resolving a key collision during a merge."""

    def __call__(self, existing: V, incoming: V) -> V:
        """
        Resolve two values stored under the same key.

        Args:
            existing: The value already accumulated for the key.
            incoming: The value coming from the mapping being merged in.

        Returns:
            The value to keep in the merged mapping.
        """
        ...


class Predicate(Protocol[K_contra, V_contra]):
    """Defines the contract for testing a single mapping entry."""

    def __call__(self, key: K_contra, value: V_contra) -> bool: ...


class EntryMapper(Protocol[K_contra, V_contra, K2_co, V2_co]):
    """Defines the contract for turning an entry into a new (key, value) pair."""

    def __call__(self, key: K_contra, value: V_contra) -> tuple[K2_co, V2_co]: ...


class EntryAction(Protocol[K_contra, V_contra]):
    """Defines the contract for a callback consuming a single entry."""

    def __call__(self, key: K_contra, value: V_contra) -> None: ...
