import dataclasses

import pytest
from pydantic import ValidationError

from pagewise import Pagination, PaginationMeta, PaginationOptions, create_pagination, resolve_options


class TestPaginationOptions:
    def test_requires_page_and_limit(self):
        with pytest.raises(ValidationError):
            PaginationOptions(page=1)
        with pytest.raises(ValidationError):
            PaginationOptions(limit=10)

    def test_bounds_are_not_validated(self):
        options = PaginationOptions(page=-3, limit=0)
        assert options.page == -3
        assert options.limit == 0

    def test_frozen(self):
        options = PaginationOptions(page=1, limit=10)
        with pytest.raises(ValidationError):
            options.page = 2


class TestResolveOptions:
    def test_from_model(self):
        assert resolve_options(PaginationOptions(page=2, limit=15)) == (2, 15)

    def test_from_mapping(self):
        assert resolve_options({"page": -1, "limit": 10}) == (-1, 10)

    def test_missing_key_raises(self):
        with pytest.raises(KeyError):
            resolve_options({"page": 1})


class TestCreatePagination:
    def test_total_pages_rounds_up(self):
        result = create_pagination(list(range(10)), 25, 1, 10)
        assert result.meta == PaginationMeta(total_items=25, total_pages=3, current_page=1)

    def test_exact_multiple(self):
        result = create_pagination(list(range(10)), 30, 3, 10)
        assert result.meta.total_pages == 3

    def test_no_items(self):
        result = create_pagination([], 0, 1, 10)
        assert result.items == []
        assert result.meta.total_pages == 0

    def test_current_page_is_echoed(self):
        result = create_pagination([], 25, 9, 10)
        assert result.meta.current_page == 9
        assert result.meta.total_pages == 3

    def test_zero_limit_raises(self):
        with pytest.raises(ZeroDivisionError):
            create_pagination([], 5, 1, 0)

    def test_owns_its_items(self):
        items = [1, 2, 3]
        result = create_pagination(items, 3, 1, 10)
        items.append(4)
        assert result.items == [1, 2, 3]

    def test_immutable(self):
        result = create_pagination([1], 1, 1, 10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.items = []
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.meta.total_items = 7


def test_to_dict_shape():
    result = Pagination(
        items=[{"name": "Alice"}],
        meta=PaginationMeta(total_items=1, total_pages=1, current_page=1),
    )
    assert result.to_dict() == {
        "items": [{"name": "Alice"}],
        "meta": {"totalItems": 1, "totalPages": 1, "currentPage": 1},
    }
