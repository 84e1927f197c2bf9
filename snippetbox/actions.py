"""Explicit user actions and the single dispatcher that applies them.

Surfaces build an action value carrying everything it needs (the index and,
for edits, the new code) and hand it to :func:`dispatch`. Failures come back
as an :class:`Outcome` with ``ok=False`` and a message for the user instead of
propagating.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Tuple, Union

from .errors import PersistenceError, SnippetIndexError, ValidationError
from .highlight import DEFAULT_LANGUAGE, highlight
from .snippet.model import Snippet
from .snippet.store import SnippetStore

logger = logging.getLogger("snippetbox")

UNSAVED_WARNING = "Changes might not survive a reload."


@dataclass(frozen=True, slots=True)
class View:
    index: int


@dataclass(frozen=True, slots=True)
class Edit:
    index: int
    code: str


@dataclass(frozen=True, slots=True)
class Delete:
    index: int


@dataclass(frozen=True, slots=True)
class Create:
    fields: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Search:
    query: str = ""


Action = Union[View, Edit, Delete, Create, Search]


@dataclass(slots=True)
class Outcome:
    """What a surface needs to re-render after an action."""

    action: Action
    ok: bool
    message: str = ""
    index: int | None = None
    snippet: Snippet | None = None
    markup: str | None = None
    entries: List[Tuple[int, Snippet]] = field(default_factory=list)
    persisted: bool = True


def highlight_snippet(snippet: Snippet) -> str:
    """Markup for a snippet's code.

    The snippet page highlights every untagged snippet as Java, so an empty
    language tag uses the Java grammar. Any other unsupported tag comes back
    as plain escaped text.
    """
    return highlight(snippet.code, snippet.language or DEFAULT_LANGUAGE)


def dispatch(store: SnippetStore, action: Action) -> Outcome:
    """Apply ``action`` to ``store`` and report what happened."""
    try:
        return _apply(store, action)
    except (ValidationError, SnippetIndexError) as exc:
        logger.info("%s rejected: %s", type(action).__name__, exc)
        return Outcome(action=action, ok=False, message=str(exc))
    except PersistenceError as exc:
        return _unsaved_outcome(store, action, exc)


def _apply(store: SnippetStore, action: Action) -> Outcome:
    if isinstance(action, View):
        snippet = store.get(action.index)
        return Outcome(
            action=action,
            ok=True,
            index=action.index,
            snippet=snippet,
            markup=highlight_snippet(snippet),
        )

    if isinstance(action, Edit):
        store.update_code(action.index, action.code)
        return Outcome(
            action=action,
            ok=True,
            message="Changes saved successfully!",
            index=action.index,
            snippet=store.get(action.index),
            entries=store.list(),
        )

    if isinstance(action, Delete):
        removed = store.delete(action.index)
        return Outcome(
            action=action,
            ok=True,
            message=f'"{removed.display_title}" deleted successfully.',
            snippet=removed,
            entries=store.list(),
        )

    if isinstance(action, Create):
        index = store.create(action.fields)
        return Outcome(
            action=action,
            ok=True,
            message="Snippet saved successfully!",
            index=index,
            snippet=store.get(index),
            entries=store.list(),
        )

    if isinstance(action, Search):
        return Outcome(action=action, ok=True, entries=store.search(action.query))

    raise TypeError(f"Unsupported action: {action!r}")


def _unsaved_outcome(store: SnippetStore, action: Action, exc: PersistenceError) -> Outcome:
    outcome = Outcome(
        action=action,
        ok=True,
        message=f"{exc} {UNSAVED_WARNING}",
        entries=store.list(),
        persisted=False,
    )
    if isinstance(action, Create):
        outcome.index = exc.result
    elif isinstance(action, Delete):
        outcome.snippet = exc.result
    elif isinstance(action, Edit):
        outcome.index = action.index
    return outcome


__all__ = [
    "Action",
    "Create",
    "Delete",
    "Edit",
    "Outcome",
    "Search",
    "UNSAVED_WARNING",
    "View",
    "dispatch",
    "highlight_snippet",
]
