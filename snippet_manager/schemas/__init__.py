"""Pydantic request/response schemas."""

from snippet_manager.schemas.pagination import Page, PageRequest
from snippet_manager.schemas.snippet import (
    SnippetEdit,
    SnippetFilter,
    SnippetInput,
    SnippetOutput,
    SnippetRelation,
    SnippetSummary,
)

__all__ = [
    "Page",
    "PageRequest",
    "SnippetEdit",
    "SnippetFilter",
    "SnippetInput",
    "SnippetOutput",
    "SnippetRelation",
    "SnippetSummary",
]
