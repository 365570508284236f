from __future__ import annotations

from typing import Any


class IndexCursorError(Exception):
    """Base exception for all indexcursor errors."""


class MalformedCursor(IndexCursorError, ValueError):
    """Raised when a cursor is not a decimal encoding of a non-negative index."""

    def __init__(self, cursor: Any) -> None:
        self.cursor = cursor
        super().__init__(f"Malformed cursor: {cursor!r}")


class UnsupportedTraversalOrder(IndexCursorError, ValueError):
    """Raised when a page calculation is requested for an unknown traversal order."""
