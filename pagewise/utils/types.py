from __future__ import annotations

from typing import Any, Protocol, Self, TypeVar

# Type aliases for better clarity
SearchOptions = dict[str, Any]
RawRow = dict[str, Any]

# Generic type variable for paginated records
T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class RepositoryLike(Protocol[T_co]):
    """Anything that can fetch a window of records and count the full match."""

    async def find_and_count(self, **criteria: Any) -> tuple[list[T_co], int]: ...


class QueryLike(Protocol[T_co]):
    """A mutable, not-yet-executed query supporting windowing and duplication."""

    def limit(self, n: int) -> Self: ...

    def offset(self, n: int) -> Self: ...

    def take(self, n: int) -> Self: ...

    def skip(self, n: int) -> Self: ...

    def clone(self) -> Self: ...

    async def get_count(self) -> int: ...

    async def get_many_and_count(self) -> tuple[list[T_co], int]: ...

    async def get_raw_many(self) -> list[RawRow]: ...


def merge_search_options(
    window: SearchOptions,
    search_options: SearchOptions | None = None,
) -> SearchOptions:
    """Merge window bounds with caller criteria.

    Args:
        window: The ``skip``/``take`` bounds computed for the requested page
        search_options: Caller criteria (takes precedence over window)

    Returns:
        Merged criteria dictionary
    """
    return {**window, **(search_options or {})}
