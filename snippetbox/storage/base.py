from __future__ import annotations

from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class PersistenceAdapter(Protocol):
    """Key-value byte store the snippet store reads from and writes to.

    ``set`` raises on failure; there are no transactions and the last write
    wins.
    """

    def get(self, key: str) -> bytes | None:
        ...

    def set(self, key: str, value: bytes) -> None:
        ...


class MemoryAdapter:
    """Process-local adapter, used for ephemeral sessions and tests."""

    def __init__(self, initial: Dict[str, bytes] | None = None) -> None:
        self._data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)


__all__ = ["MemoryAdapter", "PersistenceAdapter"]
