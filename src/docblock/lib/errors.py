"""Library error types."""

from __future__ import annotations


class DocblockError(Exception):
    """Base class for docblock library errors."""


class DocumentShapeError(DocblockError, ValueError):
    """Raised when an input document has a shape with no defined rendering."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"Invalid document shape at '{path}': {message}")
        self.path = path
        self.message = message
