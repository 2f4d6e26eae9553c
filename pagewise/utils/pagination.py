from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PaginationOptions(BaseModel):
    """Requested page and page size. Both are required."""

    model_config = {"frozen": True}

    page: int
    limit: int


@dataclass(frozen=True)
class PaginationMeta:
    """Summary of a paginated result."""

    total_items: int
    total_pages: int
    current_page: int

    def to_dict(self) -> dict[str, int]:
        return {
            "totalItems": self.total_items,
            "totalPages": self.total_pages,
            "currentPage": self.current_page,
        }


@dataclass(frozen=True)
class Pagination(Generic[T]):
    """Offset-based pagination result."""

    items: list[T]
    meta: PaginationMeta

    def to_dict(self) -> dict[str, Any]:
        return {"items": list(self.items), "meta": self.meta.to_dict()}
