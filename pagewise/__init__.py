from pagewise.core import (
    FromQuery,
    FromRawQuery,
    FromRepository,
    Query,
    Repository,
    create_pagination,
    paginate,
    paginate_query,
    paginate_raw,
    paginate_repository,
    resolve_options,
)
from pagewise.lifecycle import (
    enable_tracing,
    disable_tracing,
    PaginationEvent,
    add_listener,
)
from pagewise.utils import (
    PagewiseError,
    InvalidSearchOptions,
    Pagination,
    PaginationMeta,
    PaginationOptions,
)

__all__ = [
    # Core
    "FromQuery",
    "FromRawQuery",
    "FromRepository",
    "Query",
    "Repository",
    "create_pagination",
    "paginate",
    "paginate_query",
    "paginate_raw",
    "paginate_repository",
    "resolve_options",
    # Lifecycle
    "enable_tracing",
    "disable_tracing",
    "PaginationEvent",
    "add_listener",
    # Utils
    "PagewiseError",
    "InvalidSearchOptions",
    "Pagination",
    "PaginationMeta",
    "PaginationOptions",
]
