"""Translates raw listing parameters into a NewsQuery."""

from datetime import datetime, timedelta

from news_api.domain.entities import NewsQuery, SortField, SortOrder, as_utc
from news_api.domain.exceptions import InvalidQueryError


def day_window(value: datetime) -> tuple[datetime, datetime]:
    """UTC calendar day containing ``value`` as a half-open [start, end) range."""
    start = as_utc(value).replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


def _parse_date(raw: str) -> datetime:
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        raise InvalidQueryError("date", raw, "Invalid date filter") from None


def _parse_sort_field(raw: str | None) -> SortField:
    if raw is None:
        return SortField.DATE
    try:
        return SortField(raw)
    except ValueError:
        raise InvalidQueryError("sortBy", raw, "Invalid sort field") from None


def build_news_query(
    date: str | None = None,
    title: str | None = None,
    sort_by: str | None = None,
    order_by: str | None = None,
) -> NewsQuery:
    """Build the filter/sort query for ``GET /news``.

    Blank parameters are treated as absent. Sorting always applies and
    defaults to ascending by date; only the exact value ``orderBy=desc``
    reverses it.
    """
    date = date.strip() if date else None
    title = title or None
    sort_by = sort_by.strip() if sort_by else None

    date_from = date_to = None
    if date:
        date_from, date_to = day_window(_parse_date(date))

    order = SortOrder.DESC if order_by == SortOrder.DESC.value else SortOrder.ASC

    return NewsQuery(
        date_from=date_from,
        date_to=date_to,
        title_contains=title,
        sort_field=_parse_sort_field(sort_by),
        sort_order=order,
    )
