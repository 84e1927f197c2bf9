"""Runtime configuration and factories for adapters and stores."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any

from .exception_handler import ErrorHandler
from .snippet.store import STORAGE_KEY, SnippetStore
from .storage import FileAdapter, MemoryAdapter, PersistenceAdapter, RedisAdapter

logger = logging.getLogger("snippetbox")

BACKEND_MEMORY = "memory"
BACKEND_FILE = "file"
BACKEND_REDIS = "redis"
BACKENDS = (BACKEND_MEMORY, BACKEND_FILE, BACKEND_REDIS)

DEFAULT_DATA_DIR = "~/.snippetbox"
DEFAULT_REDIS_URL = "redis://127.0.0.1:6379/0"


@dataclass(slots=True)
class Settings:
    """Where snippets live and how loudly the package logs."""

    backend: str = BACKEND_FILE
    data_dir: str = DEFAULT_DATA_DIR
    redis_url: str = DEFAULT_REDIS_URL
    storage_key: str = STORAGE_KEY
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        backend = (os.getenv("SNIPPETS_BACKEND") or BACKEND_FILE).strip().lower()
        if backend not in BACKENDS:
            logger.warning("Unknown SNIPPETS_BACKEND %s, using %s", backend, BACKEND_FILE)
            backend = BACKEND_FILE

        return cls(
            backend=backend,
            data_dir=os.getenv("SNIPPETS_DIR") or DEFAULT_DATA_DIR,
            redis_url=os.getenv("REDIS_URL") or DEFAULT_REDIS_URL,
            storage_key=os.getenv("SNIPPETS_STORAGE_KEY") or STORAGE_KEY,
            log_level=os.getenv("SNIPPETS_LOG_LEVEL") or "WARNING",
        )

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Copy with every non-``None`` override applied."""
        return replace(self, **{name: value for name, value in overrides.items() if value is not None})


def create_adapter(settings: Settings) -> PersistenceAdapter:
    if settings.backend == BACKEND_MEMORY:
        return MemoryAdapter()
    if settings.backend == BACKEND_REDIS:
        return RedisAdapter.from_url(settings.redis_url)
    return FileAdapter(settings.data_dir)


def create_store(
    settings: Settings,
    *,
    adapter: PersistenceAdapter | None = None,
    error_handler: ErrorHandler | None = None,
) -> SnippetStore:
    """Build a store for ``settings`` and load its collection."""
    store = SnippetStore(
        adapter or create_adapter(settings),
        key=settings.storage_key,
        error_handler=error_handler,
    )
    store.load()
    return store


__all__ = [
    "BACKENDS",
    "BACKEND_FILE",
    "BACKEND_MEMORY",
    "BACKEND_REDIS",
    "Settings",
    "create_adapter",
    "create_store",
]
