from pagewise.lifecycle.observability import (
    enable_tracing,
    disable_tracing,
    PaginationEvent,
    add_listener,
    remove_listener,
    get_events,
    clear_events,
)

__all__ = [
    "enable_tracing",
    "disable_tracing",
    "PaginationEvent",
    "add_listener",
    "remove_listener",
    "get_events",
    "clear_events",
]
