"""Snippet data model and the store that owns the collection."""

from .model import Snippet
from .store import STORAGE_KEY, SnippetStore

__all__ = ["STORAGE_KEY", "Snippet", "SnippetStore"]
