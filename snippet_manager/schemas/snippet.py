"""Pydantic schemas for snippet create/edit/search payloads."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from snippet_manager.domain.entities import ReviewStatus

SnippetRelation = Literal["all", "owned", "shared"]


class SnippetInput(BaseModel):
    """Payload for creating a snippet."""

    name: str = Field(..., min_length=1, max_length=255)
    language: str = Field(..., min_length=1, max_length=50)
    code: str


class SnippetEdit(BaseModel):
    """Payload for replacing a snippet's code."""

    code: str


class SnippetOutput(BaseModel):
    """Snippet metadata combined with its code body."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    language: str
    code: str
    author: str


class SnippetFilter(BaseModel):
    """Search criteria, all optional."""

    name: str | None = Field(
        default=None,
        description="Case-insensitive substring match on the snippet name",
    )
    language: str | None = None
    status: ReviewStatus | None = Field(
        default=None,
        description="Match on the caller's own review status",
    )
    relation: SnippetRelation = Field(
        default="all",
        description="all = authored or shared, owned = authored, shared = shared by others",
    )


class SnippetSummary(BaseModel):
    """Lightweight search row, without the code body."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    language: str
    author: str
    status: ReviewStatus | None = None
