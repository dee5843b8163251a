"""Unit tests for the pydantic data models."""

import pytest
from pydantic import ValidationError

from maputils.models import DiffReason, Entry, EntryComparison


class TestEntry:
    def test_fields_and_tuple(self):
        entry = Entry(key="red", value=1)
        assert entry.key == "red"
        assert entry.value == 1
        assert entry.as_tuple() == ("red", 1)

    def test_is_frozen(self):
        entry = Entry(key="red", value=1)
        with pytest.raises(ValidationError):
            entry.value = 2

    def test_equality_by_content(self):
        assert Entry(key="a", value=1) == Entry(key="a", value=1)
        assert Entry(key="a", value=1) != Entry(key="a", value=2)

    def test_arbitrary_objects_are_stored_as_is(self):
        class Payload:
            pass

        payload = Payload()
        assert Entry(key=("x", 1), value=payload).value is payload


class TestDiffReason:
    def test_values(self):
        """Integer values are stable."""
        assert DiffReason.VALUE_MISMATCH == 0
        assert DiffReason.MISSING_IN_LEFT == 1
        assert DiffReason.MISSING_IN_RIGHT == 2


class TestEntryComparison:
    def test_defaults(self):
        comparison = EntryComparison(reason=DiffReason.MISSING_IN_LEFT)
        assert comparison.left is None
        assert comparison.right is None
        assert comparison.diff == ""

    def test_reason_is_required(self):
        with pytest.raises(ValidationError):
            EntryComparison(left=1, right=2)

    def test_model_dump(self):
        comparison = EntryComparison(
            left=2, right=99, diff="", reason=DiffReason.VALUE_MISMATCH
        )
        assert comparison.model_dump() == {
            "left": 2,
            "right": 99,
            "diff": "",
            "reason": DiffReason.VALUE_MISMATCH,
        }
