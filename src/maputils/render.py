"""
Text rendering of mappings.

Provides the YAML serializer used by the command-line interface and the
deterministic unified-diff renderer that fills ``EntryComparison.diff``.
"""

import datetime
import difflib
import logging
from collections.abc import Mapping
from io import StringIO
from typing import Any

from ruamel.yaml import YAML

from .models import DiffRenderOptions

logger = logging.getLogger(__name__)

# Exact types the safe dumper represents natively
_SCALARS = (str, int, float, bool, type(None), datetime.date, datetime.datetime)


def _build_yaml() -> YAML:
    yaml = YAML(typ="safe", pure=True)
    yaml.default_flow_style = False
    yaml.allow_unicode = True
    yaml.width = 4096
    return yaml


_yaml_dumper = _build_yaml()


def _sort_key(key: Any) -> tuple[str, str]:
    return type(key).__name__, repr(key)


def _plain_scalar(value: Any) -> Any:
    """
    Reduce a leaf value to an exact type the safe dumper can represent.

    Subclasses of ``str``, ``int`` and ``float`` (string enums, ``IntEnum``
    members such as ``DiffReason``) are reduced to their base value; anything
    else that is not an exact scalar is rendered with ``repr``.
    """
    if type(value) in _SCALARS:
        return value
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    return repr(value)


def to_plain(value: Any) -> Any:
    """
    Normalize a value into data the safe YAML dumper can always represent.

    Mappings are rebuilt with their keys sorted and their keys reduced like
    any other leaf value. Lists and tuples become lists, sets become lists
    sorted by ``repr``. Dates and datetimes are kept as is.
    """
    if isinstance(value, Mapping):
        plain: dict[Any, Any] = {}
        for key in sorted(value.keys(), key=_sort_key):
            plain[_plain_scalar(key)] = to_plain(value[key])
        return plain
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [to_plain(item) for item in sorted(value, key=_sort_key)]
    return _plain_scalar(value)


def to_yaml(data: Any) -> str:
    """Serialize ``data`` as block-style YAML after normalizing it."""
    stream = StringIO()
    _yaml_dumper.dump(to_plain(data), stream)
    return stream.getvalue()


def render_mapping_diff(
    left: Mapping[Any, Any] | None,
    right: Mapping[Any, Any] | None,
    options: DiffRenderOptions | None = None,
) -> str:
    """
    Render a unified diff between the YAML forms of two mappings.

    Args:
        left: Mapping shown with ``-`` lines.
        right: Mapping shown with ``+`` lines.
        options: Labels and context size; defaults to ``DiffRenderOptions()``.

    Returns:
        The diff text, or an empty string when both render identically.
    """
    options = options or DiffRenderOptions()

    left_lines = to_yaml(left or {}).splitlines()
    right_lines = to_yaml(right or {}).splitlines()
    if left_lines == right_lines:
        return ""

    text = "\n".join(
        difflib.unified_diff(
            left_lines, right_lines, **options.unified_diff_kwargs()
        )
    )
    logger.debug(f"Rendered mapping diff ({len(text.splitlines())} line(s))")
    return text
