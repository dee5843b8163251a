"""Generic helpers for merging, comparing and transforming mappings."""

from .accessors import entries, get_or_default, get_or_raise, keys, values
from .diff import diff, key_diff
from .exceptions import MappingLoadError, MapUtilsError, MissingKeyError
from .merge import merge
from .models import DiffReason, DiffRenderOptions, Entry, EntryComparison
from .mutators import clear, clone, copy_into, equal, set_if_absent, set_if_present
from .protocols import ConflictResolver, EntryAction, EntryMapper, Predicate
from .render import render_mapping_diff
from .resolvers import nop_resolver, overwrite_resolver
from .transforms import filter_entries, invert, map_entries, map_to_list, take_if

__all__ = [
    "merge",
    "overwrite_resolver",
    "nop_resolver",
    "diff",
    "key_diff",
    "render_mapping_diff",
    "keys",
    "values",
    "entries",
    "get_or_default",
    "get_or_raise",
    "set_if_present",
    "set_if_absent",
    "clear",
    "clone",
    "copy_into",
    "equal",
    "filter_entries",
    "take_if",
    "map_entries",
    "map_to_list",
    "invert",
    "Entry",
    "EntryComparison",
    "DiffReason",
    "DiffRenderOptions",
    "ConflictResolver",
    "Predicate",
    "EntryMapper",
    "EntryAction",
    "MapUtilsError",
    "MissingKeyError",
    "MappingLoadError",
]
