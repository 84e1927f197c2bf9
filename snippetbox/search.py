"""Substring filtering over indexed snippets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Tuple

if TYPE_CHECKING:
    from .snippet.model import Snippet

SEARCH_FIELDS = ("title", "language", "description")


def matches(snippet: "Snippet", needle: str) -> bool:
    """True when ``needle`` (already casefolded) occurs in a searchable field."""
    return any(needle in (getattr(snippet, name) or "").casefold() for name in SEARCH_FIELDS)


def search(
    entries: Iterable[Tuple[int, "Snippet"]],
    query: str | None,
) -> List[Tuple[int, "Snippet"]]:
    """Return the entries whose title, language or description contain ``query``.

    Matching is case-insensitive and ignores the code. Original indices and
    order are kept; a blank query returns every entry.
    """
    needle = (query or "").strip().casefold()
    if not needle:
        return list(entries)
    return [(index, snippet) for index, snippet in entries if matches(snippet, needle)]


__all__ = ["SEARCH_FIELDS", "matches", "search"]
