"""Lexical rule tables for the languages the highlighter understands."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Sequence, Tuple


class Category(str, Enum):
    """Lexical classes; each value doubles as the CSS class of its span."""

    COMMENT = "comment"
    STRING = "string"
    NUMBER = "number"
    KEYWORD = "keyword"
    TYPE = "datatype"
    CLASS_NAME = "class"
    METHOD = "method"


@dataclass(frozen=True, slots=True)
class Rule:
    category: Category
    pattern: str


@dataclass(frozen=True)
class Grammar:
    """Ordered rules for one language; earlier rules win ties."""

    name: str
    rules: Tuple[Rule, ...]
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # One alternation, one named group per rule. Patterns must not use
        # capturing groups of their own.
        alternation = "|".join(
            f"(?P<r{position}>{rule.pattern})" for position, rule in enumerate(self.rules)
        )
        object.__setattr__(self, "_regex", re.compile(alternation))

    @property
    def regex(self) -> re.Pattern[str]:
        return self._regex

    def category_for(self, group_name: str) -> Category:
        return self.rules[int(group_name[1:])].category


def _words(words: Sequence[str]) -> str:
    return r"\b(?:" + "|".join(words) + r")\b"


JAVA_KEYWORDS = (
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char", "class", "const",
    "continue", "default", "do", "double", "else", "enum", "extends", "final", "finally", "float",
    "for", "goto", "if", "implements", "import", "instanceof", "int", "interface", "long", "native",
    "new", "package", "private", "protected", "public", "return", "short", "static", "strictfp",
    "super", "switch", "synchronized", "this", "throw", "throws", "transient", "try", "void",
    "volatile", "while",
)

JAVA_TYPES = (
    "String", "Integer", "Double", "Float", "Character", "Boolean", "Object", "System", "Math",
    "Thread",
)

JAVA = Grammar(
    name="java",
    rules=(
        Rule(Category.COMMENT, r"/\*[\s\S]*?\*/"),
        Rule(Category.COMMENT, r"//[^\r\n]*"),
        Rule(Category.STRING, r'"(?:\\.|[^"\\])*"'),
        Rule(Category.STRING, r"'(?:\\.|[^'\\])*'"),
        Rule(Category.NUMBER, r"\b\d+(?:\.\d+)?\b"),
        Rule(Category.KEYWORD, _words(JAVA_KEYWORDS)),
        Rule(Category.TYPE, _words(JAVA_TYPES)),
        Rule(Category.CLASS_NAME, r"\b[A-Z][a-zA-Z0-9_]*\b"),
        Rule(Category.METHOD, r"\b[a-zA-Z_][a-zA-Z0-9_]*(?=\s*\()"),
    ),
)

_GRAMMARS: Dict[str, Grammar] = {JAVA.name: JAVA}


def get_grammar(language: str | None) -> Grammar | None:
    """Return the grammar registered for ``language``, if any."""
    if not language:
        return None
    return _GRAMMARS.get(language.strip().lower())


__all__ = [
    "Category",
    "Grammar",
    "JAVA",
    "JAVA_KEYWORDS",
    "JAVA_TYPES",
    "Rule",
    "get_grammar",
]
