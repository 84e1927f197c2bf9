"""In-memory snippet collection with best-effort persistence.

Snippets are identified by their position in the collection. Deleting a
snippet shifts every later snippet down by one, so an index captured before
a delete may address a different snippet afterwards; callers re-fetch
through :meth:`SnippetStore.list` after deleting.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from ..errors import DeserializationError, PersistenceError, SnippetIndexError, ValidationError
from ..exception_handler import ErrorHandler
from ..search import search as search_entries
from ..storage.base import PersistenceAdapter
from .model import SNIPPET_FIELDS, Snippet

logger = logging.getLogger("snippetbox")

STORAGE_KEY = "codeSnippets"

SnippetFields = Union[Snippet, Mapping[str, Any]]
IndexedSnippet = Tuple[int, Snippet]


class SnippetStore:
    """Sole owner of the snippet collection for one session."""

    def __init__(
        self,
        adapter: PersistenceAdapter,
        *,
        key: str = STORAGE_KEY,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        self.adapter = adapter
        self.key = key
        self.error_handler = error_handler or ErrorHandler()
        self._snippets: List[Snippet] = []

    def __len__(self) -> int:
        return len(self._snippets)

    def load(self) -> List[Snippet]:
        """Replace the collection with what the adapter holds.

        Missing or unreadable data yields an empty collection; decoding
        problems are reported to the error handler and never raised.
        """
        try:
            raw = self.adapter.get(self.key)
        except Exception as exc:
            self._report_load_error(DeserializationError(f"Failed to read stored snippets: {exc}"))
            self._snippets = []
            return self.snapshot()

        if raw is None:
            self._snippets = []
            return self.snapshot()

        try:
            self._snippets = decode_collection(raw)
        except DeserializationError as exc:
            self._report_load_error(exc)
            self._snippets = []

        logger.debug("Loaded %d snippets from %s", len(self._snippets), self.key)
        return self.snapshot()

    def save(self, *, operation: str = "save") -> None:
        """Write the whole collection back. Raises :class:`PersistenceError`."""
        try:
            self.adapter.set(self.key, encode_collection(self._snippets))
        except Exception as exc:
            error = PersistenceError(f"Failed to write snippets: {exc}")
            self.error_handler.collect_save_error(error, self.key, operation)
            raise error from exc

    def create(self, fields: SnippetFields) -> int:
        """Append a snippet and return its index.

        Every field is trimmed. A snippet with neither title nor code is
        rejected with :class:`ValidationError` and nothing is stored.
        """
        snippet = _build_snippet(fields)
        if not snippet.title and not snippet.code:
            raise ValidationError("Please provide a title or some code before saving.")

        self._snippets.append(snippet)
        index = len(self._snippets) - 1
        logger.debug("Created snippet %d (%s)", index, snippet.display_title)
        self._persist("create", result=index)
        return index

    def update_code(self, index: int, code: str) -> None:
        """Replace only the code of the snippet at ``index``."""
        current = self._require(index)
        self._snippets[index] = current.model_copy(update={"code": code if code is not None else ""})
        logger.debug("Updated code of snippet %d", index)
        self._persist("update_code", result=None)

    def delete(self, index: int) -> Snippet:
        """Remove and return the snippet at ``index``; later indices shift down."""
        self._require(index)
        removed = self._snippets.pop(index)
        logger.debug("Deleted snippet %d (%s)", index, removed.display_title)
        self._persist("delete", result=removed)
        return removed

    def get(self, index: int) -> Snippet:
        return self._require(index).model_copy()

    def list(self) -> List[IndexedSnippet]:
        """Every snippet paired with its current index, as copies."""
        return [(index, snippet.model_copy()) for index, snippet in enumerate(self._snippets)]

    def snapshot(self) -> List[Snippet]:
        return [snippet.model_copy() for snippet in self._snippets]

    def search(self, query: str | None) -> List[IndexedSnippet]:
        return search_entries(self.list(), query)

    def _require(self, index: int) -> Snippet:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._snippets):
            raise SnippetIndexError(index, len(self._snippets))
        return self._snippets[index]

    def _persist(self, operation: str, *, result: Any) -> None:
        try:
            self.save(operation=operation)
        except PersistenceError as exc:
            exc.result = result
            raise

    def _report_load_error(self, error: DeserializationError) -> None:
        self.error_handler.collect_load_error(error, self.key)


def encode_collection(snippets: List[Snippet]) -> bytes:
    """Serialize snippets as a JSON array of four-field objects.

    Output is ASCII, so lone surrogates read from stored data survive as
    ``\\uXXXX`` escapes.
    """
    return json.dumps(
        [snippet.to_dict() for snippet in snippets],
        separators=(",", ":"),
    ).encode("utf-8")


def decode_collection(raw: bytes | str) -> List[Snippet]:
    """Parse stored bytes into snippets, tolerating missing fields."""
    try:
        text = raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else raw
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise DeserializationError(f"Stored snippets are not valid JSON: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, list):
        raise DeserializationError(
            f"Stored snippets must be a JSON array, got {type(data).__name__}"
        )

    snippets: List[Snippet] = []
    for position, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning("Skipping stored snippet %d: expected an object, got %s", position, type(item).__name__)
            continue
        try:
            snippets.append(Snippet.model_validate(item))
        except PydanticValidationError as exc:  # pragma: no cover - every field coerces to str
            logger.warning("Skipping stored snippet %d: %s", position, exc)
    return snippets


def _build_snippet(fields: SnippetFields) -> Snippet:
    if isinstance(fields, Snippet):
        values = fields.to_dict()
    else:
        values = {name: fields.get(name) for name in SNIPPET_FIELDS}
    snippet = Snippet.model_validate(values)
    return snippet.model_copy(update={name: getattr(snippet, name).strip() for name in SNIPPET_FIELDS})


__all__ = [
    "IndexedSnippet",
    "STORAGE_KEY",
    "SnippetStore",
    "decode_collection",
    "encode_collection",
]
