"""Local snippet manager: a persisted snippet store, a highlighter and search."""

from .actions import Create, Delete, Edit, Outcome, Search, View, dispatch
from .config import Settings, create_adapter, create_store
from .errors import (
    DeserializationError,
    PersistenceError,
    SnippetError,
    SnippetIndexError,
    ValidationError,
)
from .exception_handler import ErrorHandler, setup_logging
from .highlight import highlight, tokenize
from .search import search
from .snippet import Snippet, SnippetStore
from .storage import FileAdapter, MemoryAdapter, PersistenceAdapter, RedisAdapter

__all__ = [
    "Create",
    "Delete",
    "DeserializationError",
    "Edit",
    "ErrorHandler",
    "FileAdapter",
    "MemoryAdapter",
    "Outcome",
    "PersistenceAdapter",
    "PersistenceError",
    "RedisAdapter",
    "Search",
    "Settings",
    "Snippet",
    "SnippetError",
    "SnippetIndexError",
    "SnippetStore",
    "ValidationError",
    "View",
    "create_adapter",
    "create_store",
    "dispatch",
    "highlight",
    "search",
    "setup_logging",
    "tokenize",
]
