"""Pydantic models for the public API surface."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..snippet import Snippet


class SnippetCreateRequest(BaseModel):
    title: str = Field("", description="Snippet title; may be empty when code is given")
    language: str = Field("", description="Language tag, for example 'Java'")
    code: str = Field("", description="Code fragment; may be empty when a title is given")
    description: str = Field("", description="Free-form description")


class SnippetCodeUpdateRequest(BaseModel):
    code: str = Field(..., description="Replacement code for the snippet")


class SnippetResponse(BaseModel):
    index: int
    title: str
    language: str
    code: str
    description: str
    display_title: str
    display_language: str
    display_description: str

    @classmethod
    def from_snippet(cls, index: int, snippet: Snippet) -> "SnippetResponse":
        return cls(
            index=index,
            title=snippet.title,
            language=snippet.language,
            code=snippet.code,
            description=snippet.description,
            display_title=snippet.display_title,
            display_language=snippet.display_language,
            display_description=snippet.display_description,
        )


class SnippetDetailResponse(SnippetResponse):
    markup: str = ""


class SnippetListResponse(BaseModel):
    query: str | None = None
    total: int
    results: List[SnippetResponse]


__all__ = [
    "SnippetCodeUpdateRequest",
    "SnippetCreateRequest",
    "SnippetDetailResponse",
    "SnippetListResponse",
    "SnippetResponse",
]
