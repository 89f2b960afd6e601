"""Pagination value types exchanged with paged use cases."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")
R = TypeVar("R")


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class SortOrder(BaseModel):
    """Ordering on a single attribute."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Name of the attribute to sort by")
    direction: SortDirection = Field(SortDirection.ASC, description="Sort direction")

    @classmethod
    def asc(cls, key: str) -> SortOrder:
        return cls(key=key, direction=SortDirection.ASC)

    @classmethod
    def desc(cls, key: str) -> SortOrder:
        return cls(key=key, direction=SortDirection.DESC)


class PageRequest(BaseModel):
    """Zero-based page number and page size, with optional ordering."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(0, ge=0, description="Zero-based page index")
    size: int = Field(20, ge=1, description="Maximum number of items per page")
    sort: tuple[SortOrder, ...] = Field(default_factory=tuple, description="Sort orders")

    @classmethod
    def of(cls, page: int, size: int, *sort: SortOrder) -> PageRequest:
        return cls(page=page, size=size, sort=sort)

    @property
    def offset(self) -> int:
        """Index of the first item on this page."""
        return self.page * self.size

    def next(self) -> PageRequest:
        return self.model_copy(update={"page": self.page + 1})

    def previous_or_first(self) -> PageRequest:
        if self.page == 0:
            return self
        return self.model_copy(update={"page": self.page - 1})

    def first(self) -> PageRequest:
        return self.model_copy(update={"page": 0})


class Page(BaseModel, Generic[T]):
    """A slice of results plus what is needed to navigate the rest.

    ``total_elements`` is the size of the whole result set, not of ``content``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    content: list[T] = Field(default_factory=list)
    request: PageRequest = Field(default_factory=PageRequest)
    total_elements: int = Field(0, ge=0)

    @classmethod
    def empty(cls, request: PageRequest | None = None) -> Page[T]:
        return cls(content=[], request=request or PageRequest(), total_elements=0)

    @classmethod
    def from_sequence(cls, items: Sequence[T], request: PageRequest) -> Page[T]:
        """Cut the page described by ``request`` out of an already loaded sequence."""
        start = request.offset
        return cls(
            content=list(items[start : start + request.size]),
            request=request,
            total_elements=len(items),
        )

    @property
    def number(self) -> int:
        return self.request.page

    @property
    def size(self) -> int:
        return self.request.size

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)

    @property
    def is_empty(self) -> bool:
        return not self.content

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    def map(self, converter: Callable[[T], R]) -> Page[R]:
        """Return a page with the same position whose items went through ``converter``."""
        return Page(
            content=[converter(item) for item in self.content],
            request=self.request,
            total_elements=self.total_elements,
        )
