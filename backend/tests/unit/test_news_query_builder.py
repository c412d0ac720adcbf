"""Unit tests for translating listing parameters into a NewsQuery."""

from datetime import datetime, timezone

import pytest

from news_api.application.services import build_news_query, day_window
from news_api.domain.entities import NewsQuery, SortField, SortOrder
from news_api.domain.exceptions import InvalidQueryError


def test_no_parameters_sorts_by_date_ascending():
    assert build_news_query() == NewsQuery(sort_field=SortField.DATE, sort_order=SortOrder.ASC)


def test_date_filter_covers_the_whole_utc_day():
    query = build_news_query(date="2024-03-20T17:45:12")
    assert query.date_from == datetime(2024, 3, 20, tzinfo=timezone.utc)
    assert query.date_to == datetime(2024, 3, 21, tzinfo=timezone.utc)


def test_date_filter_converts_offsets_to_utc_before_truncating():
    query = build_news_query(date="2024-03-20T23:30:00-05:00")
    assert query.date_from == datetime(2024, 3, 21, tzinfo=timezone.utc)


def test_day_window_at_month_end():
    start, end = day_window(datetime(2024, 2, 29, 10, tzinfo=timezone.utc))
    assert (start, end) == (
        datetime(2024, 2, 29, tzinfo=timezone.utc),
        datetime(2024, 3, 1, tzinfo=timezone.utc),
    )


def test_invalid_date_is_rejected():
    with pytest.raises(InvalidQueryError) as excinfo:
        build_news_query(date="yesterday")
    assert excinfo.value.message == "Invalid date filter"


def test_title_filter_is_passed_through():
    assert build_news_query(title="Test Title 1").title_contains == "Test Title 1"


def test_blank_parameters_are_ignored():
    assert build_news_query(date="", title="", sort_by="") == NewsQuery()


@pytest.mark.parametrize(
    "order_by, expected",
    [
        ("desc", SortOrder.DESC),
        ("DESC", SortOrder.ASC),
        (" desc ", SortOrder.ASC),
        ("asc", SortOrder.ASC),
        ("down", SortOrder.ASC),
        (None, SortOrder.ASC),
    ],
)
def test_only_desc_reverses_order(order_by, expected):
    assert build_news_query(sort_by="title", order_by=order_by).sort_order is expected


def test_unknown_sort_field_is_rejected():
    with pytest.raises(InvalidQueryError) as excinfo:
        build_news_query(sort_by="__class__")
    assert excinfo.value.parameter == "sortBy"
