"""Models and in-memory capabilities shared by the test suite."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Item(Base):
    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]
    category: Mapped[str] = mapped_column(default="default")


async def seed_items(session: AsyncSession, n: int, **kwargs: Any) -> list[Item]:
    items = [Item(name=f"item_{i:03d}", **kwargs) for i in range(n)]
    session.add_all(items)
    await session.commit()
    return items


class StubRepository:
    """Repository over a list of dicts, recording every criteria it receives."""

    source_name = "stub_items"

    def __init__(self, rows: list[dict[str, Any]], error: Exception | None = None) -> None:
        self.rows = rows
        self.calls: list[dict[str, Any]] = []
        self.error = error

    async def find_and_count(self, **criteria: Any) -> tuple[list[dict[str, Any]], int]:
        self.calls.append(dict(criteria))
        if self.error is not None:
            raise self.error
        skip = criteria.pop("skip", 0)
        take = criteria.pop("take", None)
        where = criteria.pop("where", {})
        matching = [
            row for row in self.rows
            if all(row.get(k) == v for k, v in {**where, **criteria}.items())
        ]
        end = None if take is None else skip + take
        return matching[skip:end], len(matching)


class StubQuery:
    """Mutable query over a list whose count honors its own window."""

    def __init__(self, rows: list[dict[str, Any]]) -> None:
        self.rows = rows
        self.limit_count: int | None = None
        self.offset_count: int | None = None
        self.take_count: int | None = None
        self.skip_count: int | None = None
        self.clones: list[StubQuery] = []

    def limit(self, n: int) -> StubQuery:
        self.limit_count = n
        return self

    def offset(self, n: int) -> StubQuery:
        self.offset_count = n
        return self

    def take(self, n: int) -> StubQuery:
        self.take_count = n
        return self

    def skip(self, n: int) -> StubQuery:
        self.skip_count = n
        return self

    def clone(self) -> StubQuery:
        copy = StubQuery(self.rows)
        copy.limit_count = self.limit_count
        copy.offset_count = self.offset_count
        copy.take_count = self.take_count
        copy.skip_count = self.skip_count
        self.clones.append(copy)
        return copy

    def _window(self, limit: int | None, offset: int | None) -> list[dict[str, Any]]:
        start = max(offset or 0, 0)
        end = None if limit is None else start + limit
        return self.rows[start:end]

    async def get_count(self) -> int:
        return len(self._window(self.limit_count, self.offset_count))

    async def get_many_and_count(self) -> tuple[list[dict[str, Any]], int]:
        return self._window(self.take_count, self.skip_count), len(self.rows)

    async def get_raw_many(self) -> list[dict[str, Any]]:
        return self._window(self.limit_count, self.offset_count)


def make_rows(n: int, category: str = "default") -> list[dict[str, Any]]:
    return [{"id": i, "name": f"item_{i:03d}", "category": category} for i in range(n)]
