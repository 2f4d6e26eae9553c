from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pagewise.utils.exceptions import InvalidSearchOptions, PagewiseError
from pagewise.utils.pagination import Pagination, PaginationOptions

T = TypeVar("T")


class PaginationParams:
    """FastAPI dependency for pagination parameters.

    Clamps ``page`` to at least 1 and ``limit`` to ``1..max_limit``. The cap is a
    class attribute so it never becomes a request parameter.
    """

    max_limit: int = 100

    def __init__(self, page: int = 1, limit: int = 20):
        self.page = max(1, page)
        self.limit = min(max(1, limit), self.max_limit)

    @property
    def options(self) -> PaginationOptions:
        return PaginationOptions(page=self.page, limit=self.limit)


def pagination_params(default_limit: int = 20, max_limit: int = 100) -> Callable[..., PaginationParams]:
    """Build a PaginationParams dependency with custom defaults.

    Example:
        @app.get("/users")
        async def list_users(params: PaginationParams = Depends(pagination_params(default_limit=50))):
            ...
    """

    bounded = type("BoundedPaginationParams", (PaginationParams,), {"max_limit": max_limit})

    def dependency(page: int = 1, limit: int = default_limit) -> PaginationParams:
        return bounded(page=page, limit=limit)

    return dependency


class PaginationMetaResponse(BaseModel):
    """Serialized pagination metadata."""

    model_config = ConfigDict(populate_by_name=True)

    total_items: int = Field(alias="totalItems")
    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response model for API endpoints."""

    items: list[T]
    meta: PaginationMetaResponse

    @classmethod
    def from_pagination(cls, result: Pagination) -> PaginatedResponse:
        return cls(
            items=result.items,
            meta=PaginationMetaResponse(
                total_items=result.meta.total_items,
                total_pages=result.meta.total_pages,
                current_page=result.meta.current_page,
            ),
        )


def register_exception_handlers(app: Any) -> None:
    """Register pagewise exception handlers on a FastAPI app."""
    from starlette.responses import JSONResponse

    @app.exception_handler(InvalidSearchOptions)
    async def invalid_search_options_handler(request: Any, exc: InvalidSearchOptions):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(PagewiseError)
    async def pagewise_error_handler(request: Any, exc: PagewiseError):
        return JSONResponse(status_code=500, content={"detail": str(exc)})
