from __future__ import annotations

import logging
from typing import Any, Generic, Self, TypeVar

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Query(Generic[T]):
    """Mutable query builder over a SQLAlchemy select bound to a session.

    Chainable methods modify this instance and return it. Use ``clone()``
    to branch a query before further changes.

    ``take``/``skip`` window hydrated results; ``limit``/``offset`` window
    raw rows and serve as the fallback for hydrated results when
    ``take``/``skip`` are unset.
    """

    def __init__(
        self,
        session: AsyncSession,
        statement: Select[Any],
        limit_count: int | None = None,
        offset_count: int | None = None,
        take_count: int | None = None,
        skip_count: int | None = None,
    ) -> None:
        self._session = session
        self._statement = statement
        self._limit_count = limit_count
        self._offset_count = offset_count
        self._take_count = take_count
        self._skip_count = skip_count

    @classmethod
    def of(cls, session: AsyncSession, model: type[T]) -> Query[T]:
        """Start a query selecting every row of a mapped model."""
        return cls(session, select(model))

    @property
    def source_name(self) -> str:
        froms = self._statement.get_final_froms()
        return getattr(froms[0], "name", str(froms[0])) if froms else "query"

    @property
    def statement(self) -> Select[Any]:
        return self._statement

    def clone(self) -> Query[T]:
        """Return an independent copy sharing the session."""
        return Query(
            self._session,
            self._statement,
            limit_count=self._limit_count,
            offset_count=self._offset_count,
            take_count=self._take_count,
            skip_count=self._skip_count,
        )

    # --- Chainable methods ---

    def where(self, *criteria: ColumnElement[bool]) -> Self:
        self._statement = self._statement.where(*criteria)
        return self

    def order_by(self, *clauses: Any) -> Self:
        self._statement = self._statement.order_by(*clauses)
        return self

    def limit(self, n: int | None) -> Self:
        self._limit_count = n
        return self

    def offset(self, n: int | None) -> Self:
        self._offset_count = n
        return self

    def take(self, n: int | None) -> Self:
        self._take_count = n
        return self

    def skip(self, n: int | None) -> Self:
        self._skip_count = n
        return self

    # --- Terminal methods ---

    async def get_count(self) -> int:
        """Count rows the statement matches, ignoring any window and ordering."""
        count_stmt = select(func.count()).select_from(self._statement.order_by(None).subquery())
        total = await self._session.scalar(count_stmt) or 0
        logger.debug(f"Counted {total} rows for '{self.source_name}'")
        return total

    async def get_many(self) -> list[T]:
        """Execute with take/skip applied and return hydrated records."""
        limit = self._take_count if self._take_count is not None else self._limit_count
        offset = self._skip_count if self._skip_count is not None else self._offset_count
        result = await self._session.scalars(self._windowed(limit, offset))
        return list(result.all())

    async def get_many_and_count(self) -> tuple[list[T], int]:
        items = await self.get_many()
        total = await self.get_count()
        return items, total

    async def get_raw_many(self) -> list[dict[str, Any]]:
        """Execute with limit/offset applied and return rows as plain dicts."""
        result = await self._session.execute(self._windowed(self._limit_count, self._offset_count))
        return [dict(row) for row in result.mappings().all()]

    # --- Internal ---

    def _windowed(self, limit: int | None, offset: int | None) -> Select[Any]:
        stmt = self._statement
        if offset is not None:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return stmt
