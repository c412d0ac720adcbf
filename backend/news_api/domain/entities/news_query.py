"""Query parameters for listing news — built by the application layer,
executed by the repository."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SortField(str, Enum):
    """Fields a news listing can be ordered by."""

    DATE = "date"
    TITLE = "title"
    DESCRIPTION = "description"
    TEXT = "text"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class NewsQuery:
    """Filter + sort criteria for the news listing.

    ``date_from`` is inclusive and ``date_to`` exclusive; both are aware UTC
    datetimes or both are None. ``title_contains`` is matched case-insensitively.
    """

    date_from: datetime | None = None
    date_to: datetime | None = None
    title_contains: str | None = None
    sort_field: SortField = SortField.DATE
    sort_order: SortOrder = SortOrder.ASC
