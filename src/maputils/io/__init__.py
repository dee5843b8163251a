"""Loading mapping documents from disk."""

from .file_loader import FileLoader

__all__ = ["FileLoader"]
