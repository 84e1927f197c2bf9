from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

SNIPPET_FIELDS = ("title", "language", "code", "description")

DEFAULT_TITLE = "Untitled"
DEFAULT_LANGUAGE = "Unknown"
DEFAULT_DESCRIPTION = "No description provided."
DEFAULT_CODE = "No code found."


class Snippet(BaseModel):
    """A stored code fragment. Every field may be empty."""

    title: str = ""
    language: str = ""
    code: str = ""
    description: str = ""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator(*SNIPPET_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)

    @property
    def display_title(self) -> str:
        return self.title or DEFAULT_TITLE

    @property
    def display_language(self) -> str:
        return self.language or DEFAULT_LANGUAGE

    @property
    def display_description(self) -> str:
        return self.description or DEFAULT_DESCRIPTION

    @property
    def display_code(self) -> str:
        return self.code or DEFAULT_CODE

    def to_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in SNIPPET_FIELDS}


__all__ = [
    "DEFAULT_CODE",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_LANGUAGE",
    "DEFAULT_TITLE",
    "SNIPPET_FIELDS",
    "Snippet",
]
