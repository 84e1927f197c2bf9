"""Single-pass tokenizer and HTML renderer for code snippets.

The tokenizer scans the original source once. At every position the
earliest match of the grammar's alternation wins, and ties at the same
position go to the rule listed first. The resulting tokens never overlap,
so markup is produced in one final pass and no rule can ever see the
output of another.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .grammar import JAVA, Category, Grammar, get_grammar

DEFAULT_LANGUAGE = JAVA.name


@dataclass(frozen=True, slots=True)
class Token:
    start: int
    end: int
    category: Category
    text: str


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>``; quotes are left as they are."""
    return html.escape(text, quote=False)


def tokenize(source: str, language: str | None = DEFAULT_LANGUAGE) -> List[Token]:
    """Return the categorized, non-overlapping tokens of ``source`` in order."""
    grammar = get_grammar(language)
    if grammar is None or not source:
        return []
    return list(_scan(source, grammar))


def _scan(source: str, grammar: Grammar) -> Iterator[Token]:
    for match in grammar.regex.finditer(source):
        group_name = match.lastgroup
        if group_name is None:  # pragma: no cover - every alternative is a named group
            continue
        yield Token(
            start=match.start(),
            end=match.end(),
            category=grammar.category_for(group_name),
            text=match.group(),
        )


def segments(source: str, tokens: Iterable[Token]) -> Iterator[Tuple[Category | None, str]]:
    """Interleave ``tokens`` with the plain text between them."""
    position = 0
    for token in tokens:
        if token.start > position:
            yield None, source[position:token.start]
        yield token.category, token.text
        position = token.end
    if position < len(source):
        yield None, source[position:]


def render_html(source: str, tokens: Iterable[Token]) -> str:
    parts: List[str] = []
    for category, text in segments(source, tokens):
        escaped = escape_html(text)
        if category is None:
            parts.append(escaped)
        else:
            parts.append(f'<span class="{category.value}">{escaped}</span>')
    return "".join(parts)


def highlight(source: str | None, language: str | None = DEFAULT_LANGUAGE) -> str:
    """Render ``source`` as escaped HTML with category-tagged spans.

    Languages without a grammar come back as plain escaped text.
    """
    text = source or ""
    if not text:
        return ""
    return render_html(text, tokenize(text, language))


__all__ = [
    "DEFAULT_LANGUAGE",
    "Token",
    "escape_html",
    "highlight",
    "render_html",
    "segments",
    "tokenize",
]
