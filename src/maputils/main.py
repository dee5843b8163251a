"""
Command-line interface for merging, diffing and inverting mapping documents.

Every command reads YAML or JSON files whose top level is a mapping and writes
its result to standard output.
"""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, NoReturn

from .diff import diff, key_diff
from .exceptions import MappingLoadError, MapUtilsError
from .io.file_loader import FileLoader
from .merge import merge
from .models import DiffReason, DiffRenderOptions, EntryComparison
from .protocols import ConflictResolver
from .render import to_yaml
from .resolvers import nop_resolver, overwrite_resolver
from .transforms import invert

logger = logging.getLogger(__name__)

STRATEGIES: dict[str, Callable[[], ConflictResolver[Any]]] = {
    "overwrite": overwrite_resolver,
    "keep": nop_resolver,
}

_ABSENT_LABEL = "(absent)"


def non_negative_int(text: str) -> int:
    """argparse type accepting integers >= 0."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one sub-parser per command."""
    parser = argparse.ArgumentParser(
        prog="maputils",
        description="Merge, compare and invert YAML/JSON mapping documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Merge two documents, later files winning on conflicts
  maputils merge base.yaml override.yaml

  # Merge keeping the first value seen for every key
  maputils merge --strategy keep base.yaml override.json

  # Show per-key differences (exit code 1 when the documents differ)
  maputils diff old.yaml new.yaml --context 1
        """,
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable informational logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    merge_parser = subparsers.add_parser("merge", help="Merge documents left to right")
    merge_parser.add_argument("files", nargs="+", type=Path, metavar="FILE")
    merge_parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default="overwrite",
        help="How to resolve keys present in several files (default: overwrite)",
    )

    diff_parser = subparsers.add_parser("diff", help="Compare two documents")
    diff_parser.add_argument("left", type=Path)
    diff_parser.add_argument("right", type=Path)
    diff_parser.add_argument(
        "--context",
        type=non_negative_int,
        default=3,
        metavar="N",
        help="Context lines around each change in the text diff (default: 3)",
    )

    keydiff_parser = subparsers.add_parser(
        "keydiff", help="List keys present in only one of two documents"
    )
    keydiff_parser.add_argument("left", type=Path)
    keydiff_parser.add_argument("right", type=Path)

    invert_parser = subparsers.add_parser("invert", help="Swap keys and values")
    invert_parser.add_argument("file", type=Path, metavar="FILE")

    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed command line arguments.
    """
    return build_parser().parse_args(argv)


def run_merge(files: list[Path], strategy: str = "overwrite") -> int:
    """Merge the given documents and print the result as YAML."""
    documents = [FileLoader.load(path) for path in files]
    logger.info(f"Merging {len(documents)} document(s) with '{strategy}' strategy")
    merged = merge(STRATEGIES[strategy](), *documents)
    print(to_yaml(merged), end="")
    return 0


def _format_side(value: Any, present: bool) -> str:
    return repr(value) if present else _ABSENT_LABEL


def format_comparison(key: Any, comparison: EntryComparison[Any]) -> str:
    """Format one diff result as ``<reason> <key>: <left> -> <right>``."""
    left = _format_side(
        comparison.left, comparison.reason != DiffReason.MISSING_IN_LEFT
    )
    right = _format_side(
        comparison.right, comparison.reason != DiffReason.MISSING_IN_RIGHT
    )
    return f"{comparison.reason.name.lower()} {key}: {left} -> {right}"


def run_diff(left: Path, right: Path, context: int = 3) -> int:
    """Print the differences between two documents.

    Returns:
        0 when the documents are equal, 1 otherwise.
    """
    options = DiffRenderOptions(
        context_lines=context, left_label=str(left), right_label=str(right)
    )
    result = diff(
        FileLoader.load(left), FileLoader.load(right), render_options=options
    )
    if not result:
        logger.info("Documents are identical")
        return 0

    for key in sorted(result, key=str):
        print(format_comparison(key, result[key]))

    text = next(iter(result.values())).diff
    if text:
        print()
        print(text)
    return 1


def run_keydiff(left: Path, right: Path) -> int:
    """Print the keys found in only one of two documents."""
    left_only, right_only = key_diff(FileLoader.load(left), FileLoader.load(right))
    print("only in left:")
    for key in sorted(left_only, key=str):
        print(f"  {key}")
    print("only in right:")
    for key in sorted(right_only, key=str):
        print(f"  {key}")
    return 0


def run_invert(file: Path) -> int:
    """Print the inverted document as YAML."""
    document = FileLoader.load(file)
    try:
        inverted = invert(document)
    except TypeError as e:
        raise MapUtilsError(
            f"Cannot invert {file.name}: every value must be hashable ({e})",
            error_code="NOT_INVERTIBLE",
            path=str(file),
        ) from e
    print(to_yaml(inverted), end="")
    return 0


def run_command(args: argparse.Namespace) -> NoReturn:
    """Execute the selected command and exit with its status code.

    Raises:
        SystemExit: Always exits with appropriate code (0 or 1 for success,
            >1 for errors).
    """
    configure_logging(args.debug, args.verbose)

    try:
        if args.command == "merge":
            code = run_merge(args.files, args.strategy)
        elif args.command == "diff":
            code = run_diff(args.left, args.right, args.context)
        elif args.command == "keydiff":
            code = run_keydiff(args.left, args.right)
        else:
            code = run_invert(args.file)
        sys.exit(code)

    except MappingLoadError as e:
        logger.error(f"Input error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        sys.exit(2)
    except MapUtilsError as e:
        logger.error(f"Mapping error: {e}")
        sys.exit(3)
    except (PermissionError, FileNotFoundError, OSError) as e:
        logger.error(f"File system error: {e}")
        sys.exit(4)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.debug:
            logger.exception("Full traceback:")
        sys.exit(9)


def main(argv: Sequence[str] | None = None) -> NoReturn:
    run_command(parse_arguments(argv))


if __name__ == "__main__":
    main()
