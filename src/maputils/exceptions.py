"""
maputils Exception Classes

Typed exception hierarchy shared by the mapping helpers, the file loader and the
command-line interface.
"""

from pathlib import Path
from typing import Any


class MapUtilsError(Exception):
    """
    Base exception for all maputils errors.

    Subclasses name their failure with ``error_code``. Keyword arguments given
    at construction land in ``context`` and are appended to the message, so a
    logged error names the key or file it is about.
    """

    error_code: str | None = None

    def __init__(
        self, message: str, *, error_code: str | None = None, **context: Any
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        self.context = context

    def __str__(self) -> str:
        parts = [f"[{self.error_code}]"] if self.error_code else []
        parts.append(self.message)
        if self.context:
            details = ", ".join(f"{name}={value}" for name, value in self.context.items())
            parts.append(f"(Context: {details})")
        return " ".join(parts)


class MissingKeyError(MapUtilsError, LookupError):
    """
    Raised when a key that must exist is not in the mapping.

    Signals a caller-side invariant violation: code that expects absence as a
    normal case should check membership or use ``get_or_default`` instead.
    """

    error_code = "MISSING_KEY"

    def __init__(self, key: Any) -> None:
        super().__init__(f"key {key!r} doesn't exist in map", key=repr(key))
        self.key = key


class MappingLoadError(MapUtilsError):
    """
    Raised by the I/O layer when a mapping document cannot be read or parsed.

    Examples
    --------
    * File does not exist / bad extension
    * Bytes that are not UTF-8
    * YAML or JSON syntax error
    * Top-level object is not a mapping
    """

    error_code = "MAPPING_LOAD_ERROR"

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        if path is None:
            super().__init__(message)
        else:
            super().__init__(message, path=str(path))

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the load error."""
        path = self.context.get("path")
        if path is None:
            return "Check the input file for syntax errors"
        return (
            f"Check that '{path}' exists, is UTF-8 encoded and holds a YAML or "
            "JSON mapping at the top level"
        )
