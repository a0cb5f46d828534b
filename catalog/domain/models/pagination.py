"""List query criteria and paginated results."""

from __future__ import annotations

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .enums import SortDirection

T = TypeVar("T")


class SearchCriteria(BaseModel):
    """Filter, sort and page parameters for a list query.

    page is 1-based.  offset, when given, overrides the page-derived offset.
    sort_by must name a key of allowed_sort; anything else falls back to the
    first allowed column.
    """

    model_config = ConfigDict(frozen=True)

    filter: dict[str, Any] = Field(default_factory=dict)
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)
    sort_by: str = "id"
    sort_dir: SortDirection = SortDirection.ASC
    offset: int | None = Field(default=None, ge=0)
    allowed_sort: dict[str, str] = Field(
        default_factory=lambda: {"id": "id", "name": "name"}
    )

    def resolved_offset(self) -> int:
        if self.offset is not None:
            return self.offset
        return (self.page - 1) * self.page_size

    def order(self) -> tuple[str, bool]:
        """Return (column, descending) for the requested sort."""
        column = self.allowed_sort.get(self.sort_by) or next(iter(self.allowed_sort.values()))
        return column, self.sort_dir is SortDirection.DESC


class PaginatedResult(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    items: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)
    filter: dict[str, Any] = Field(default_factory=dict)
    sort: dict[str, str] = Field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        """Pages needed for total items; 1 when there are none."""
        if self.total == 0:
            return 1
        return math.ceil(self.total / self.page_size)

    def meta(self) -> dict[str, Any]:
        return {
            "filter": self.filter,
            "sort": self.sort,
            "pagination": {
                "total": self.total,
                "display": len(self.items),
                "page": self.page,
                "page_size": self.page_size,
                "total_pages": self.total_pages,
            },
        }
