"""SQLAlchemy ORM model for the NewsArticle entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from news_api.domain.entities.news import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from news_api.infrastructure.database.base import Base


class NewsModel(Base):
    """ORM model — maps to the 'news' table."""

    __tablename__ = "news"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(DESCRIPTION_MAX_LENGTH), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<NewsModel(id={self.id}, title='{self.title}')>"
