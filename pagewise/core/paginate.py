from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pagewise.lifecycle.observability import track_pagination
from pagewise.utils.pagination import Pagination, PaginationMeta, PaginationOptions
from pagewise.utils.types import QueryLike, RepositoryLike, SearchOptions, merge_search_options

logger = logging.getLogger(__name__)

T = TypeVar("T")

OptionsLike = PaginationOptions | Mapping[str, Any]


def resolve_options(options: OptionsLike) -> tuple[int, int]:
    """Extract ``(page, limit)`` from options without defaulting or validation."""
    if isinstance(options, Mapping):
        return options["page"], options["limit"]
    return options.page, options.limit


def create_pagination(
    items: list[T],
    total_items: int,
    current_page: int,
    limit: int,
) -> Pagination[T]:
    """Build the result envelope.

    Args:
        items: Records in the requested window
        total_items: Count over the full match, ignoring the window
        current_page: Requested page, echoed verbatim
        limit: Page size used to derive ``total_pages``

    Returns:
        Immutable Pagination

    Raises:
        ZeroDivisionError: If limit is 0
    """
    total_pages = math.ceil(total_items / limit)
    return Pagination(
        items=list(items),
        meta=PaginationMeta(
            total_items=total_items,
            total_pages=total_pages,
            current_page=current_page,
        ),
    )


def _source_name(source: Any) -> str:
    return getattr(source, "source_name", type(source).__name__)


async def paginate_repository(
    repository: RepositoryLike[T],
    options: OptionsLike,
    search_options: SearchOptions | None = None,
) -> Pagination[T]:
    """Paginate through a repository's combined find-and-count operation.

    A page below 1 returns an empty result without touching the repository.
    Caller ``search_options`` are merged after ``skip``/``take`` and win on
    collision.
    """
    page, limit = resolve_options(options)
    source = _source_name(repository)

    if page < 1:
        logger.debug(f"Page {page} is below 1 for '{source}', returning empty page")
        return create_pagination([], 0, page, limit)

    criteria = merge_search_options(
        {"skip": limit * (page - 1), "take": limit},
        search_options,
    )
    logger.debug(f"Paginating repository '{source}' (page={page}, limit={limit})")

    async with track_pagination("repository", source, page, limit) as stats:
        items, total = await repository.find_and_count(**criteria)
        stats.record(items, total)

    return create_pagination(items, total, page, limit)


async def paginate_query(query: QueryLike[T], options: OptionsLike) -> Pagination[T]:
    """Paginate a query returning hydrated records with a single fetch-and-count call.

    No page guard: a page below 1 yields a negative skip, passed through as-is.
    """
    page, limit = resolve_options(options)
    source = _source_name(query)
    logger.debug(f"Paginating query '{source}' (page={page}, limit={limit})")

    async with track_pagination("query", source, page, limit) as stats:
        items, total = await query.take(limit).skip((page - 1) * limit).get_many_and_count()
        stats.record(items, total)

    return create_pagination(items, total, page, limit)


async def paginate_raw(query: QueryLike[Any], options: OptionsLike) -> Pagination[dict[str, Any]]:
    """Paginate a query returning raw rows.

    Raw rows have no combined fetch-and-count, so the query is cloned before
    the window is applied and the clone is counted separately.
    """
    page, limit = resolve_options(options)
    source = _source_name(query)
    logger.debug(f"Paginating raw query '{source}' (page={page}, limit={limit})")

    async with track_pagination("raw", source, page, limit) as stats:
        total_query = query.clone()
        items = await query.limit(limit).offset((page - 1) * limit).get_raw_many()
        total = await total_query.get_count()
        stats.record(items, total)

    return create_pagination(items, total, page, limit)


# --- Tagged sources ---


@dataclass(frozen=True)
class FromRepository(Generic[T]):
    """Paginate through a repository, optionally narrowed by search criteria."""

    repository: RepositoryLike[T]
    search_options: SearchOptions | None = None

    async def paginate(self, options: OptionsLike) -> Pagination[T]:
        return await paginate_repository(self.repository, options, self.search_options)


@dataclass(frozen=True)
class FromQuery(Generic[T]):
    """Paginate a query returning hydrated records."""

    query: QueryLike[T]

    async def paginate(self, options: OptionsLike) -> Pagination[T]:
        return await paginate_query(self.query, options)


@dataclass(frozen=True)
class FromRawQuery:
    """Paginate a query returning raw rows."""

    query: QueryLike[Any]

    async def paginate(self, options: OptionsLike) -> Pagination[dict[str, Any]]:
        return await paginate_raw(self.query, options)


PaginationSource = FromRepository[Any] | FromQuery[Any] | FromRawQuery


async def paginate(source: PaginationSource, options: OptionsLike) -> Pagination[Any]:
    """Paginate whichever source the caller tagged.

    Example:
        await paginate(FromRepository(users, {"where": {"active": True}}), {"page": 2, "limit": 10})
    """
    return await source.paginate(options)
