from enum import IntEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

K = TypeVar("K")
V = TypeVar("V")


class Entry(BaseModel, Generic[K, V]):
    """A single key/value pair materialized from a mapping."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: K = Field(description="Key of the entry in its source mapping.")
    value: V = Field(description="Value stored under the key. Not copied.")

    def as_tuple(self) -> tuple[K, V]:
        """Return the entry as a plain ``(key, value)`` tuple."""
        return self.key, self.value


class DiffReason(IntEnum):
    """Why a key was reported by a mapping diff."""

    # The key exists on both sides with different values
    VALUE_MISMATCH = 0
    # The key exists in the right mapping only
    MISSING_IN_LEFT = 1
    # The key exists in the left mapping only
    MISSING_IN_RIGHT = 2


class EntryComparison(BaseModel, Generic[V]):
    """
    Outcome of comparing one key across two mappings.

    The side a key is missing from holds the ``missing`` placeholder chosen by
    the caller of ``diff`` (``None`` unless stated otherwise).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    left: V | None = Field(default=None, description="Value in the left mapping.")
    right: V | None = Field(default=None, description="Value in the right mapping.")
    diff: str = Field(
        default="",
        description=(
            "Text diff of the two whole mappings. Informational only; the same "
            "text is shared by every comparison produced by one diff call."
        ),
    )
    reason: DiffReason = Field(description="Which of the three outcomes applies.")


class DiffRenderOptions(BaseModel):
    """Settings for the text diff renderer."""

    context_lines: int = Field(
        default=3,
        ge=0,
        description="Unchanged lines shown around each changed hunk.",
    )
    left_label: str = Field(
        default="left", description="Header label for the left document."
    )
    right_label: str = Field(
        default="right", description="Header label for the right document."
    )

    def unified_diff_kwargs(self) -> dict[str, Any]:
        return {
            "fromfile": self.left_label,
            "tofile": self.right_label,
            "n": self.context_lines,
            "lineterm": "",
        }
