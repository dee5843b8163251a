"""Loader for mapping documents stored as local YAML or JSON files."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..exceptions import MappingLoadError

logger = logging.getLogger(__name__)

_yaml_parser = YAML(typ="safe", pure=True)


def _parse_yaml(text: str) -> Any:
    return _yaml_parser.load(text)


class FileLoader:
    """
    Read a document whose top level is a mapping and return it as a `dict`.

    The parser is picked from the file suffix. An empty document (an empty
    YAML file or a JSON ``null``) loads as an empty mapping, so it merges and
    diffs like ``{}``.
    """

    parsers: dict[str, Callable[[str], Any]] = {
        ".yaml": _parse_yaml,
        ".yml": _parse_yaml,
        ".json": json.loads,
    }

    @classmethod
    def supported_extensions(cls) -> list[str]:
        return sorted(cls.parsers)

    @classmethod
    def load(cls, path: str | Path) -> dict[Any, Any]:
        file_path = Path(path)

        parser = cls.parsers.get(file_path.suffix.lower())
        if parser is None:
            raise MappingLoadError(
                f"Unsupported extension '{file_path.suffix}'. "
                f"Supported: {', '.join(cls.supported_extensions())}",
                path=file_path,
            )

        try:
            text = file_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            logger.error("File not found: %s", file_path)
            raise MappingLoadError(
                f"File not found: {file_path}", path=file_path
            ) from exc
        except UnicodeDecodeError as exc:
            raise MappingLoadError(
                f"{file_path.name} is not valid UTF-8: {exc.reason} at byte "
                f"{exc.start}",
                path=file_path,
            ) from exc

        try:
            document = parser(text)
        except (YAMLError, ValueError) as exc:
            raise MappingLoadError(
                f"Cannot parse {file_path.name}: {exc}", path=file_path
            ) from exc

        if document is None:
            logger.debug("Empty document %s loaded as an empty mapping", file_path)
            return {}
        if not isinstance(document, dict):
            raise MappingLoadError(
                f"Top-level object must be a mapping, got {type(document).__name__}",
                path=file_path,
            )

        logger.debug("Loaded %s (%d root keys)", file_path, len(document))
        return document
