from pagewise.utils.exceptions import PagewiseError, InvalidSearchOptions
from pagewise.utils.pagination import Pagination, PaginationMeta, PaginationOptions
from pagewise.utils.types import (
    QueryLike,
    RawRow,
    RepositoryLike,
    SearchOptions,
    merge_search_options,
)

__all__ = [
    "PagewiseError",
    "InvalidSearchOptions",
    "Pagination",
    "PaginationMeta",
    "PaginationOptions",
    "QueryLike",
    "RawRow",
    "RepositoryLike",
    "SearchOptions",
    "merge_search_options",
]
