"""Key-value persistence adapters for snippet collections."""

from .base import MemoryAdapter, PersistenceAdapter
from .file_adapter import FileAdapter
from .redis_adapter import RedisAdapter

__all__ = [
    "FileAdapter",
    "MemoryAdapter",
    "PersistenceAdapter",
    "RedisAdapter",
]
