"""Unit tests for the command-line interface."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from maputils.main import configure_logging, format_comparison, main, parse_arguments
from maputils.models import DiffReason, EntryComparison

# -------------------- Fakes / helpers --------------------


@pytest.fixture(autouse=True)
def restore_root_logger():
    """configure_logging replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def run_cli(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


# --------------------------- Tests ---------------------------


class TestParseArguments:
    def test_merge_defaults(self) -> None:
        args = parse_arguments(["merge", "a.yaml", "b.yaml"])
        assert args.command == "merge"
        assert args.files == [Path("a.yaml"), Path("b.yaml")]
        assert args.strategy == "overwrite"
        assert not args.debug and not args.verbose

    def test_context_must_be_non_negative(self) -> None:
        assert parse_arguments(["diff", "--context", "0", "a", "b"]).context == 0
        with pytest.raises(SystemExit):
            parse_arguments(["diff", "--context", "-1", "a", "b"])
        with pytest.raises(SystemExit):
            parse_arguments(["diff", "--context", "two", "a", "b"])

    def test_unknown_strategy_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_arguments(["merge", "--strategy", "sum", "a.yaml"])

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_arguments([])


class TestConfigureLogging:
    def test_levels(self) -> None:
        configure_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.INFO
        configure_logging()
        assert logging.getLogger().level == logging.WARNING


class TestFormatComparison:
    def test_absent_sides(self) -> None:
        left_only = EntryComparison(left=3, reason=DiffReason.MISSING_IN_RIGHT)
        right_only = EntryComparison(right=3, reason=DiffReason.MISSING_IN_LEFT)
        assert format_comparison("k", left_only) == "missing_in_right k: 3 -> (absent)"
        assert format_comparison("k", right_only) == "missing_in_left k: (absent) -> 3"

    def test_value_mismatch(self) -> None:
        comparison = EntryComparison(
            left="a", right="b", reason=DiffReason.VALUE_MISMATCH
        )
        assert format_comparison("k", comparison) == "value_mismatch k: 'a' -> 'b'"


class TestMergeCommand:
    def test_overwrite(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        a = write(tmp_path, "a.yaml", "red: 1\nblue: 2\n")
        b = write(tmp_path, "b.json", '{"red": 10}')

        assert run_cli(["merge", str(a), str(b)]) == 0
        assert capsys.readouterr().out == "blue: 2\nred: 10\n"

    def test_keep(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        a = write(tmp_path, "a.yaml", "red: 1\nblue: 2\n")
        b = write(tmp_path, "b.json", '{"red": 10}')

        assert run_cli(["merge", "--strategy", "keep", str(a), str(b)]) == 0
        assert capsys.readouterr().out == "blue: 2\nred: 1\n"

    def test_timestamps_are_printed_as_yaml(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        a = write(tmp_path, "a.yaml", "when: 2020-01-01\n")

        assert run_cli(["merge", str(a)]) == 0
        assert capsys.readouterr().out == "when: 2020-01-01\n"


class TestDiffCommand:
    def test_identical_documents(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        a = write(tmp_path, "a.yaml", "red: 1\n")
        b = write(tmp_path, "b.yaml", "red: 1\n")

        assert run_cli(["diff", str(a), str(b)]) == 0
        assert capsys.readouterr().out == ""

    def test_different_documents(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        a = write(tmp_path, "a.yaml", "red: 1\nblue: 2\ngreen: 3\n")
        b = write(tmp_path, "b.yaml", "red: 1\nblue: 99\nyellow: 3\n")

        assert run_cli(["diff", str(a), str(b)]) == 1

        lines = capsys.readouterr().out.splitlines()
        assert lines[:3] == [
            "value_mismatch blue: 2 -> 99",
            "missing_in_right green: 3 -> (absent)",
            "missing_in_left yellow: (absent) -> 3",
        ]
        assert f"--- {a}" in lines
        assert "+blue: 99" in lines


class TestKeyDiffCommand:
    def test_lists_one_sided_keys(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        a = write(tmp_path, "a.yaml", "red: 1\nblue: 2\n")
        b = write(tmp_path, "b.yaml", "red: 5\nwhite: 3\n")

        assert run_cli(["keydiff", str(a), str(b)]) == 0
        assert capsys.readouterr().out == (
            "only in left:\n  blue\nonly in right:\n  white\n"
        )


class TestInvertCommand:
    def test_invert(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        a = write(tmp_path, "a.yaml", "x: one\ny: two\n")

        assert run_cli(["invert", str(a)]) == 0
        assert capsys.readouterr().out == "one: x\ntwo: y\n"

    def test_unhashable_values(self, tmp_path: Path) -> None:
        a = write(tmp_path, "a.yaml", "x: [1, 2]\n")
        assert run_cli(["invert", str(a)]) == 3


class TestErrorExitCodes:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert run_cli(["invert", str(tmp_path / "nope.yaml")]) == 2

    def test_negative_context_is_a_usage_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        a = write(tmp_path, "a.yaml", "red: 1\n")
        assert run_cli(["diff", "--context", "-1", str(a), str(a)]) == 2
        assert "must be >= 0" in capsys.readouterr().err

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        a = tmp_path / "a.yaml"
        a.write_bytes(b"red: \xff\xfe\n")
        assert run_cli(["merge", str(a)]) == 2
