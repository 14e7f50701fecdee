"""
Tests for the pagination engine.

Example-based tests pin the documented behavior; property-based tests
(Hypothesis) check the filter/total/window invariants over arbitrary input.
"""

from datetime import datetime, timedelta

import pytest
from hypothesis import given, settings, strategies as st

from rest_api.models import ProductCategory
from rest_api.services.base_service import TITLE_SORT_FIELDS
from rest_api.services.crud.pagination import PageWindow, PaginationEngine
from rest_api.services.domain.builders import product_category_builder
from shared.utils.schemas import PaginationRequest


def make_records(titles):
    start = datetime(2024, 1, 1)
    return [
        ProductCategory(
            id=index + 1,
            title=title,
            created=start + timedelta(minutes=index),
            updated=start + timedelta(minutes=index),
        )
        for index, title in enumerate(titles)
    ]


@pytest.fixture
def engine():
    return PaginationEngine(
        product_category_builder,
        sortable_fields=TITLE_SORT_FIELDS,
        search_text=lambda record: record.title,
    )


@pytest.fixture
def records():
    return make_records(["Vegetables", "fruits", "Berries", "Dried fruits", "Nuts"])


class TestFilter:
    def test_empty_query_keeps_everything(self, engine, records):
        total, values = engine.paginate(records, PaginationRequest(query=""))
        assert total == 5
        assert len(values) == 5

    def test_missing_query_keeps_everything(self, engine, records):
        total, _ = engine.paginate(records, PaginationRequest())
        assert total == 5

    def test_case_insensitive_substring(self, engine, records):
        total, values = engine.paginate(records, PaginationRequest(query="FRUIT"))
        assert total == 2
        assert [v.title for v in values] == ["fruits", "Dried fruits"]

    def test_no_match(self, engine, records):
        total, values = engine.paginate(records, PaginationRequest(query="meat"))
        assert total == 0
        assert values == []


class TestSort:
    def test_title_ascending_ignores_case(self, engine, records):
        _, values = engine.paginate(records, PaginationRequest(sort_by="title"))
        assert [v.title for v in values] == [
            "Berries", "Dried fruits", "fruits", "Nuts", "Vegetables",
        ]

    def test_title_descending(self, engine, records):
        _, values = engine.paginate(
            records, PaginationRequest(sort_by="title", ascending=False)
        )
        assert [v.title for v in values] == [
            "Vegetables", "Nuts", "fruits", "Dried fruits", "Berries",
        ]

    def test_camel_case_key_accepted(self, engine, records):
        _, values = engine.paginate(
            records, PaginationRequest(sort_by="Updated", ascending=False)
        )
        assert [v.id for v in values] == [5, 4, 3, 2, 1]

    def test_unknown_sort_key_keeps_order(self, engine, records):
        _, values = engine.paginate(records, PaginationRequest(sort_by="colour"))
        assert [v.id for v in values] == [1, 2, 3, 4, 5]

    def test_sort_is_stable(self, engine):
        same = make_records(["Kiwi", "apple", "KIWI", "Apple", "kiwi"])
        _, values = engine.paginate(same, PaginationRequest(sort_by="title"))
        assert [v.id for v in values] == [2, 4, 1, 3, 5]


class TestWindow:
    def test_defaults(self, engine):
        many = make_records(["Item"] * 25)
        total, values = engine.paginate(many, PaginationRequest())
        assert total == 25
        assert [v.id for v in values] == list(range(1, 11))

    def test_skip_and_take(self, engine, records):
        total, values = engine.paginate(records, PaginationRequest(skip=1, take=2))
        assert total == 5
        assert [v.id for v in values] == [2, 3]

    def test_skip_past_end(self, engine, records):
        total, values = engine.paginate(records, PaginationRequest(skip=10))
        assert total == 5
        assert values == []

    def test_take_zero(self, engine, records):
        total, values = engine.paginate(records, PaginationRequest(take=0))
        assert total == 5
        assert values == []

    def test_total_counts_before_window(self, engine, records):
        total, values = engine.paginate(
            records, PaginationRequest(query="fruit", skip=1, take=1)
        )
        assert total == 2
        assert [v.title for v in values] == ["Dried fruits"]

    def test_max_take_caps_window(self):
        capped = PageWindow.from_request(PaginationRequest(take=500), max_take=200)
        assert capped.take == 200

    def test_negative_values_rejected_by_request(self):
        with pytest.raises(ValueError):
            PaginationRequest(skip=-1)
        with pytest.raises(ValueError):
            PaginationRequest(take=-5)


class TestPaginationProperties:
    """Property-based tests for the pagination pipeline."""

    @given(
        titles=st.lists(st.sampled_from(["Apple", "apricot", "Banana", "Cherry", "date"]), max_size=30),
        query=st.one_of(st.none(), st.sampled_from(["", "a", "AP", "rr", "zz"])),
        skip=st.integers(min_value=0, max_value=40),
        take=st.integers(min_value=0, max_value=40),
    )
    @settings(max_examples=100)
    def test_total_and_window_size(self, titles, query, skip, take):
        """Property: total is the filtered count, the page is the clipped window."""
        engine = PaginationEngine(
            product_category_builder,
            sortable_fields=TITLE_SORT_FIELDS,
            search_text=lambda record: record.title,
        )
        records = make_records(titles)

        total, values = engine.paginate(
            records, PaginationRequest(query=query, skip=skip, take=take)
        )

        expected = [t for t in titles if not query or query.casefold() in t.casefold()]
        assert total == len(expected)
        assert len(values) == max(0, min(take, total - skip))

    @given(
        titles=st.lists(st.sampled_from(["Apple", "apple", "Banana", "BANANA", "cherry"]), max_size=20),
        ascending=st.booleans(),
    )
    @settings(max_examples=100)
    def test_sorted_by_title_casefold(self, titles, ascending):
        """Property: sorting by title orders by the case-folded title."""
        engine = PaginationEngine(
            product_category_builder,
            sortable_fields=TITLE_SORT_FIELDS,
            search_text=lambda record: record.title,
        )

        _, values = engine.paginate(
            make_records(titles),
            PaginationRequest(sort_by="title", ascending=ascending, take=len(titles)),
        )

        keys = [v.title.casefold() for v in values]
        assert keys == sorted(keys, reverse=not ascending)
