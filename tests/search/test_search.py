import pytest

from snippetbox.search import search
from snippetbox.snippet import Snippet


@pytest.fixture
def entries():
    snippets = [
        Snippet(title="Foo"),
        Snippet(title="bar", description="contains Foo"),
        Snippet(title="Sorting", language="Java", code="foo()"),
        Snippet(title="Parser", language="Kotlin", description="Tokenizes input"),
    ]
    return list(enumerate(snippets))


def test_matches_title_and_description_case_insensitively(entries):
    results = search(entries[:2], "foo")

    assert [index for index, _ in results] == [0, 1]


def test_blank_query_returns_everything_unchanged(entries):
    assert search(entries, "") == entries
    assert search(entries, "   ") == entries
    assert search(entries, None) == entries


def test_code_is_not_searched(entries):
    assert [index for index, _ in search(entries, "foo()")] == []


def test_language_matches_and_indices_are_preserved(entries):
    results = search(entries, "  kotlin ")

    assert results == [entries[3]]


def test_results_keep_collection_order(entries):
    results = search(entries, "o")

    assert [index for index, _ in results] == [0, 1, 2, 3]
