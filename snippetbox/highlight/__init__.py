"""Syntax highlighting for stored snippets."""

from .grammar import Category, Grammar, Rule, get_grammar
from .highlighter import DEFAULT_LANGUAGE, Token, escape_html, highlight, tokenize

__all__ = [
    "Category",
    "DEFAULT_LANGUAGE",
    "Grammar",
    "Rule",
    "Token",
    "escape_html",
    "get_grammar",
    "highlight",
    "tokenize",
]
