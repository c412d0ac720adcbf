"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.application.interfaces import NewsRepository
from news_api.domain.entities import NewsArticle, NewsQuery, SortField, SortOrder
from news_api.infrastructure.database.models import NewsModel

_SORT_COLUMNS = {
    SortField.DATE: NewsModel.date,
    SortField.TITLE: NewsModel.title,
    SortField.DESCRIPTION: NewsModel.description,
    SortField.TEXT: NewsModel.text,
}


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally.

    The pattern is used with ``ILIKE``. PostgreSQL folds case across Unicode;
    SQLite renders it as ``lower() LIKE lower()``, which folds ASCII only, so
    the local and test profiles miss matches such as "ÉTÉ" for "été".
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLAlchemyNewsRepository(NewsRepository):
    """Implements the NewsRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: NewsModel) -> NewsArticle:
        """Map ORM model → domain entity."""
        return NewsArticle(
            id=model.id,
            title=model.title,
            description=model.description,
            text=model.text,
            date=model.date,
        )

    def _to_model(self, entity: NewsArticle) -> NewsModel:
        """Map domain entity → ORM model (for creation)."""
        return NewsModel(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            text=entity.text,
            date=entity.date,
        )

    async def find(self, query: NewsQuery) -> list[NewsArticle]:
        stmt = select(NewsModel)

        if query.date_from is not None:
            stmt = stmt.where(NewsModel.date >= query.date_from)
        if query.date_to is not None:
            stmt = stmt.where(NewsModel.date < query.date_to)
        if query.title_contains:
            pattern = f"%{_escape_like(query.title_contains)}%"
            stmt = stmt.where(NewsModel.title.ilike(pattern, escape="\\"))

        column = _SORT_COLUMNS[query.sort_field]
        ordering = column.desc() if query.sort_order is SortOrder.DESC else column.asc()
        stmt = stmt.order_by(ordering, NewsModel.id)

        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_id(self, news_id: str) -> NewsArticle | None:
        result = await self._session.get(NewsModel, news_id)
        return self._to_entity(result) if result else None

    async def create(self, article: NewsArticle) -> NewsArticle:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: NewsArticle) -> NewsArticle | None:
        model = await self._session.get(NewsModel, article.id)
        if model is None:
            return None
        model.title = article.title
        model.description = article.description
        model.text = article.text
        model.date = article.date
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, news_id: str) -> bool:
        result = await self._session.execute(delete(NewsModel).where(NewsModel.id == news_id))
        return result.rowcount > 0
