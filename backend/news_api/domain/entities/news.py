"""Domain entity for a news article — pure Python, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from news_api.domain.exceptions import InvalidNewsIdError

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 255
TEXT_MAX_LENGTH = 1024 * 1024


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_news_id(raw: object) -> str:
    """Normalise a client-supplied identifier or raise InvalidNewsIdError."""
    if not isinstance(raw, str):
        raise InvalidNewsIdError(raw)
    try:
        return str(UUID(raw))
    except ValueError:
        raise InvalidNewsIdError(raw) from None


@dataclass
class NewsArticle:
    """Core domain entity representing a published news article."""

    title: str
    description: str
    text: str
    id: str = field(default_factory=lambda: str(uuid4()))
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.date = as_utc(self.date)

    def replace(
        self,
        title: str,
        description: str,
        text: str,
        date: datetime | None = None,
    ) -> None:
        """Overwrite every mutable field; ``date`` is kept when not supplied."""
        self.title = title
        self.description = description
        self.text = text
        if date is not None:
            self.date = as_utc(date)

    def merge(
        self,
        title: str | None = None,
        description: str | None = None,
        text: str | None = None,
        date: datetime | None = None,
    ) -> None:
        """Overwrite only the supplied fields."""
        if title is not None:
            self.title = title
        if description is not None:
            self.description = description
        if text is not None:
            self.text = text
        if date is not None:
            self.date = as_utc(date)
