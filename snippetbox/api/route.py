"""FastAPI routes for listing, viewing, editing and deleting snippets."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, status

from ..config import Settings, create_store
from ..snippet import SnippetStore
from .model import (
    SnippetCodeUpdateRequest,
    SnippetCreateRequest,
    SnippetDetailResponse,
    SnippetListResponse,
    SnippetResponse,
)
from .service import (
    create_snippet_service,
    delete_snippet_service,
    get_snippet_service,
    list_snippets_service,
    update_snippet_code_service,
)


def get_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if not isinstance(settings, Settings):
        raise RuntimeError("API settings have not been initialised")
    return settings


def get_store(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> SnippetStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        store = create_store(settings)
        request.app.state.store = store
    return store


router = APIRouter()


@router.get("/snippets", response_model=SnippetListResponse)
async def list_snippets(
    query: str | None = Query(None, description="Case-insensitive filter on title, language and description"),
    store: SnippetStore = Depends(get_store),
) -> SnippetListResponse:
    return list_snippets_service(store, query)


@router.post("/snippets", response_model=SnippetResponse, status_code=status.HTTP_201_CREATED)
async def create_snippet(
    payload: SnippetCreateRequest,
    store: SnippetStore = Depends(get_store),
) -> SnippetResponse:
    return create_snippet_service(payload, store)


@router.get("/snippets/{index}", response_model=SnippetDetailResponse)
async def get_snippet(
    index: int,
    store: SnippetStore = Depends(get_store),
) -> SnippetDetailResponse:
    return get_snippet_service(index, store)


@router.put("/snippets/{index}/code", response_model=SnippetResponse)
async def update_snippet_code(
    index: int,
    payload: SnippetCodeUpdateRequest,
    store: SnippetStore = Depends(get_store),
) -> SnippetResponse:
    return update_snippet_code_service(index, payload.code, store)


@router.delete("/snippets/{index}", response_model=SnippetResponse)
async def delete_snippet(
    index: int,
    store: SnippetStore = Depends(get_store),
) -> SnippetResponse:
    """Delete a snippet; every later snippet moves down one index."""

    return delete_snippet_service(index, store)


__all__ = ["router"]
