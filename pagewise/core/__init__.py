from pagewise.core.paginate import (
    FromQuery,
    FromRawQuery,
    FromRepository,
    create_pagination,
    paginate,
    paginate_query,
    paginate_raw,
    paginate_repository,
    resolve_options,
)
from pagewise.core.query import Query
from pagewise.core.repository import Repository

__all__ = [
    "FromQuery",
    "FromRawQuery",
    "FromRepository",
    "create_pagination",
    "paginate",
    "paginate_query",
    "paginate_raw",
    "paginate_repository",
    "resolve_options",
    "Query",
    "Repository",
]
