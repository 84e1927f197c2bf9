"""Exception types raised and reported by the snippet core."""

from __future__ import annotations

from typing import Any


class SnippetError(Exception):
    """Base class for every recoverable snippet-core condition."""


class DeserializationError(SnippetError):
    """Stored bytes could not be decoded into a snippet collection."""


class PersistenceError(SnippetError):
    """Writing the collection back to storage failed.

    The in-memory mutation that triggered the write is kept. ``result`` holds
    whatever the mutating call would have returned had the write succeeded.
    """

    def __init__(self, message: str, *, result: Any = None) -> None:
        super().__init__(message)
        self.result = result


class ValidationError(SnippetError):
    """A snippet was rejected before any mutation took place."""


class SnippetIndexError(SnippetError, IndexError):
    """A positional index does not address a snippet in the collection."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Snippet index {index} out of range (collection has {length})")
        self.index = index
        self.length = length


__all__ = [
    "DeserializationError",
    "PersistenceError",
    "SnippetError",
    "SnippetIndexError",
    "ValidationError",
]
