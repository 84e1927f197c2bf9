"""Service-layer helpers that translate store results into API responses."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from ..actions import UNSAVED_WARNING, highlight_snippet
from ..errors import PersistenceError, SnippetIndexError, ValidationError
from ..snippet import SnippetStore
from .model import (
    SnippetCreateRequest,
    SnippetDetailResponse,
    SnippetListResponse,
    SnippetResponse,
)

logger = logging.getLogger("snippetbox")


def _not_found(exc: SnippetIndexError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _unsaved(exc: PersistenceError) -> HTTPException:
    logger.error("Snippet change kept in memory only: %s", exc)
    return HTTPException(
        status_code=status.HTTP_507_INSUFFICIENT_STORAGE,
        detail=f"{exc} {UNSAVED_WARNING}",
    )


def list_snippets_service(store: SnippetStore, query: str | None = None) -> SnippetListResponse:
    entries = store.search(query) if query and query.strip() else store.list()
    return SnippetListResponse(
        query=query,
        total=len(store),
        results=[SnippetResponse.from_snippet(index, snippet) for index, snippet in entries],
    )


def get_snippet_service(index: int, store: SnippetStore) -> SnippetDetailResponse:
    try:
        snippet = store.get(index)
    except SnippetIndexError as exc:
        raise _not_found(exc) from exc

    base = SnippetResponse.from_snippet(index, snippet)
    return SnippetDetailResponse(**base.model_dump(), markup=highlight_snippet(snippet))


def create_snippet_service(payload: SnippetCreateRequest, store: SnippetStore) -> SnippetResponse:
    try:
        index = store.create(payload.model_dump())
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=str(exc),
        ) from exc
    except PersistenceError as exc:
        raise _unsaved(exc) from exc
    return SnippetResponse.from_snippet(index, store.get(index))


def update_snippet_code_service(index: int, code: str, store: SnippetStore) -> SnippetResponse:
    try:
        store.update_code(index, code)
    except SnippetIndexError as exc:
        raise _not_found(exc) from exc
    except PersistenceError as exc:
        raise _unsaved(exc) from exc
    return SnippetResponse.from_snippet(index, store.get(index))


def delete_snippet_service(index: int, store: SnippetStore) -> SnippetResponse:
    try:
        removed = store.delete(index)
    except SnippetIndexError as exc:
        raise _not_found(exc) from exc
    except PersistenceError as exc:
        raise _unsaved(exc) from exc
    return SnippetResponse.from_snippet(index, removed)


__all__ = [
    "create_snippet_service",
    "delete_snippet_service",
    "get_snippet_service",
    "list_snippets_service",
    "update_snippet_code_service",
]
