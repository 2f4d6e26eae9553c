from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from pagewise.utils.exceptions import InvalidSearchOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DIRECTIONS = {"ASC", "DESC"}


class Repository(Generic[T]):
    """Find-and-count access to one mapped model over an open session.

    The session's lifecycle belongs to the caller.
    """

    def __init__(self, session: AsyncSession, model: type[T]) -> None:
        self._session = session
        self._model = model
        self._columns = inspect(model).columns

    @property
    def source_name(self) -> str:
        return self._model.__tablename__

    async def find_and_count(
        self,
        *,
        skip: int | None = None,
        take: int | None = None,
        where: Mapping[str, Any] | Sequence[ColumnElement[bool]] | None = None,
        order: Mapping[str, str] | None = None,
        **conditions: Any,
    ) -> tuple[list[T], int]:
        """Fetch one window of matching records plus the count over all of them.

        Args:
            skip: Number of records to skip
            take: Maximum number of records to return
            where: Column name to value equality mapping, or SQLAlchemy expressions
            order: Column name to "ASC"/"DESC" mapping
            **conditions: Additional column equality conditions

        Returns:
            Tuple of (windowed records, total matching count)

        Raises:
            InvalidSearchOptions: If a column name or direction is unknown
        """
        clauses = self._build_clauses(where, conditions)

        stmt = select(self._model).where(*clauses)
        if order:
            stmt = stmt.order_by(*self._build_order(order))
        if skip is not None:
            stmt = stmt.offset(skip)
        if take is not None:
            stmt = stmt.limit(take)

        count_stmt: Select[tuple[int]] = select(func.count()).select_from(self._model).where(*clauses)

        result = await self._session.scalars(stmt)
        items = list(result.all())
        total = await self._session.scalar(count_stmt) or 0
        logger.debug(f"find_and_count on '{self.source_name}' returned {len(items)} of {total}")
        return items, total

    # --- Internal ---

    def _column(self, name: str) -> ColumnElement[Any]:
        try:
            return self._columns[name]
        except KeyError:
            raise InvalidSearchOptions(
                f"Unknown column '{name}' for '{self.source_name}'"
            ) from None

    def _build_clauses(
        self,
        where: Mapping[str, Any] | Sequence[ColumnElement[bool]] | None,
        conditions: Mapping[str, Any],
    ) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        if isinstance(where, (str, bytes)):
            raise InvalidSearchOptions(
                f"Invalid where criteria for '{self.source_name}': expected a mapping "
                f"or a sequence of expressions, got {type(where).__name__}"
            )
        if isinstance(where, Mapping):
            clauses.extend(self._column(name) == value for name, value in where.items())
        elif where is not None:
            clauses.extend(where)
        clauses.extend(self._column(name) == value for name, value in conditions.items())
        return clauses

    def _build_order(self, order: Mapping[str, str]) -> list[ColumnElement[Any]]:
        clauses = []
        for name, direction in order.items():
            column = self._column(name)
            direction = direction.upper()
            if direction not in _DIRECTIONS:
                raise InvalidSearchOptions(
                    f"Invalid order direction '{direction}' for column '{name}'. "
                    f"Expected ASC or DESC."
                )
            clauses.append(column.desc() if direction == "DESC" else column.asc())
        return clauses
