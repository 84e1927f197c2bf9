"""Adapter that keeps each key in its own file under a directory."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Union

logger = logging.getLogger("snippetbox")

Pathish = Union[str, Path]

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class FileAdapter:
    """Store values as ``<directory>/<key>.json`` files."""

    def __init__(self, directory: Pathish) -> None:
        self.directory = Path(directory).expanduser()

    def path_for(self, key: str) -> Path:
        safe_key = _UNSAFE_KEY_CHARS.sub("_", key) or "_"
        return self.directory / f"{safe_key}.json"

    def get(self, key: str) -> bytes | None:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None

    def set(self, key: str, value: bytes) -> None:
        path = self.path_for(key)
        self.directory.mkdir(parents=True, exist_ok=True)
        # Write to a sibling file first so a failed write never truncates the
        # previous value.
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
        logger.debug("Wrote %d bytes to %s", len(value), path)


__all__ = ["FileAdapter"]
