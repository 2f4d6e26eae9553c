from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Callable, Sized

logger = logging.getLogger("pagewise")

Listener = Callable[["PaginationEvent"], Any]


@dataclass(frozen=True)
class PaginationEvent:
    """One finished pagination call."""

    strategy: str
    source: str
    page: int
    limit: int
    duration_ms: float = 0.0
    total_items: int | None = None
    item_count: int | None = None


@dataclass
class PaginationStats:
    """Filled in by a strategy while its pagination call is being tracked."""

    total_items: int | None = None
    item_count: int | None = None

    def record(self, items: Sized, total_items: int) -> None:
        self.item_count = len(items)
        self.total_items = total_items


@dataclass
class _Tracer:
    enabled: bool = False
    slow_pagination_ms: float = 100.0
    capture_events: bool = False
    listeners: list[Listener] = field(default_factory=list)
    events: list[PaginationEvent] = field(default_factory=list)

    def record(self, event: PaginationEvent) -> None:
        if self.capture_events:
            self.events.append(event)
        if event.duration_ms > self.slow_pagination_ms:
            logger.warning(
                "Slow pagination: %s on %s (page=%d, limit=%d) took %.1fms (threshold: %.1fms)",
                event.strategy,
                event.source,
                event.page,
                event.limit,
                event.duration_ms,
                self.slow_pagination_ms,
            )
        for listener in self.listeners:
            listener(event)


_tracer = _Tracer()


def enable_tracing(slow_pagination_ms: float = 100.0, capture_events: bool = False) -> None:
    """Start emitting a PaginationEvent for every pagination call.

    Args:
        slow_pagination_ms: Calls slower than this are logged as warnings
        capture_events: Keep events in memory for ``get_events()``
    """
    _tracer.enabled = True
    _tracer.slow_pagination_ms = slow_pagination_ms
    _tracer.capture_events = capture_events


def disable_tracing() -> None:
    """Stop tracing and drop listeners and captured events."""
    global _tracer
    _tracer = _Tracer()


def get_events() -> list[PaginationEvent]:
    return list(_tracer.events)


def clear_events() -> None:
    _tracer.events.clear()


def add_listener(callback: Listener) -> None:
    _tracer.listeners.append(callback)


def remove_listener(callback: Listener) -> None:
    _tracer.listeners.remove(callback)


@asynccontextmanager
async def track_pagination(strategy: str, source: str, page: int, limit: int) -> AsyncIterator[PaginationStats]:
    """Time a pagination call; the event is emitted even if the call raises."""
    stats = PaginationStats()
    if not _tracer.enabled:
        yield stats
        return

    start = time.perf_counter()
    try:
        yield stats
    finally:
        _tracer.record(
            PaginationEvent(
                strategy=strategy,
                source=source,
                page=page,
                limit=limit,
                duration_ms=(time.perf_counter() - start) * 1000,
                total_items=stats.total_items,
                item_count=stats.item_count,
            )
        )
