"""Pagination schemas shared by search endpoints."""

import math
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")


class PageRequest(BaseModel):
    """Zero-based page request with a single sort key."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1)
    sort_by: Literal["id", "name", "language"] = "id"
    direction: Literal["asc", "desc"] = "desc"

    @computed_field
    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """One page of results with standard pagination metadata."""

    items: list[T] = Field(default_factory=list)
    page: int
    size: int
    total_elements: int

    @computed_field
    @property
    def total_pages(self) -> int:
        if self.total_elements == 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    @computed_field
    @property
    def is_last(self) -> bool:
        return self.page + 1 >= self.total_pages
