import pytest
from fastapi import HTTPException

from snippetbox.api.model import SnippetCodeUpdateRequest, SnippetCreateRequest
from snippetbox.api.route import (
    create_snippet,
    delete_snippet,
    get_snippet,
    list_snippets,
    update_snippet_code,
)
from snippetbox.snippet import SnippetStore
from snippetbox.storage import MemoryAdapter


class _FailingWriteAdapter(MemoryAdapter):
    def set(self, key, value):
        raise OSError("quota exceeded")


def _make_store(*titles):
    store = SnippetStore(MemoryAdapter())
    store.load()
    for title in titles:
        store.create({"title": title, "language": "Java", "code": "int x = 1;"})
    return store


@pytest.mark.asyncio
async def test_list_snippets_returns_indices_and_display_defaults():
    store = _make_store("first")
    store.create({"code": "return;"})

    response = await list_snippets(query=None, store=store)

    assert response.total == 2
    assert [summary.index for summary in response.results] == [0, 1]
    assert response.results[1].display_title == "Untitled"
    assert response.results[1].display_description == "No description provided."


@pytest.mark.asyncio
async def test_list_snippets_filters_by_query():
    store = _make_store("Binary search", "Quick sort", "Linear search")

    response = await list_snippets(query="SEARCH", store=store)

    assert response.query == "SEARCH"
    assert response.total == 3
    assert [summary.index for summary in response.results] == [0, 2]


@pytest.mark.asyncio
async def test_create_snippet_returns_new_index():
    store = _make_store("existing")

    response = await create_snippet(
        SnippetCreateRequest(title=" New ", language="Java", code="int y;"),
        store=store,
    )

    assert response.index == 1
    assert response.title == "New"
    assert len(store) == 2


@pytest.mark.asyncio
async def test_create_snippet_without_content_is_unprocessable():
    store = _make_store()

    with pytest.raises(HTTPException) as excinfo:
        await create_snippet(SnippetCreateRequest(description="nothing else"), store=store)

    assert excinfo.value.status_code == 422
    assert len(store) == 0


@pytest.mark.asyncio
async def test_get_snippet_includes_highlighted_markup():
    store = _make_store("first")

    response = await get_snippet(0, store=store)

    assert response.code == "int x = 1;"
    assert response.markup == '<span class="keyword">int</span> x = <span class="number">1</span>;'


@pytest.mark.asyncio
async def test_unknown_index_is_not_found():
    store = _make_store("only")

    for call in (
        get_snippet(5, store=store),
        update_snippet_code(5, SnippetCodeUpdateRequest(code="x"), store=store),
        delete_snippet(-1, store=store),
    ):
        with pytest.raises(HTTPException) as excinfo:
            await call
        assert excinfo.value.status_code == 404

    assert len(store) == 1


@pytest.mark.asyncio
async def test_update_and_delete_snippet():
    store = _make_store("a", "b", "c")

    updated = await update_snippet_code(2, SnippetCodeUpdateRequest(code="void run() {}"), store=store)
    deleted = await delete_snippet(0, store=store)

    assert updated.code == "void run() {}"
    assert deleted.title == "a"
    assert [snippet.title for _, snippet in store.list()] == ["b", "c"]
    assert store.get(1).code == "void run() {}"


@pytest.mark.asyncio
async def test_write_failure_reports_insufficient_storage():
    store = SnippetStore(_FailingWriteAdapter())

    with pytest.raises(HTTPException) as excinfo:
        await create_snippet(SnippetCreateRequest(title="kept"), store=store)

    assert excinfo.value.status_code == 507
    assert "might not survive a reload" in excinfo.value.detail
    assert len(store) == 1
