"""Application service (use case) for News operations."""

import logging

from news_api.application.interfaces import NewsRepository
from news_api.application.schemas import NewsCreate, NewsPatch
from news_api.application.services.news_query_builder import build_news_query
from news_api.domain.entities import NewsArticle, parse_news_id
from news_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class NewsService:
    """Orchestrates news business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: NewsRepository):
        self._repository = repository

    async def list_news(
        self,
        *,
        date: str | None = None,
        title: str | None = None,
        sort_by: str | None = None,
        order_by: str | None = None,
    ) -> list[NewsArticle]:
        query = build_news_query(date=date, title=title, sort_by=sort_by, order_by=order_by)
        return await self._repository.find(query)

    async def get_news(self, raw_id: str) -> NewsArticle:
        news_id = parse_news_id(raw_id)
        article = await self._repository.get_by_id(news_id)
        if article is None:
            raise EntityNotFoundError("News", news_id)
        return article

    async def create_news(self, data: NewsCreate) -> NewsArticle:
        fields = data.model_dump(exclude_none=True)
        created = await self._repository.create(NewsArticle(**fields))
        logger.info("Created news %s", created.id)
        return created

    async def replace_news(self, raw_id: str, data: NewsCreate) -> NewsArticle:
        article = await self.get_news(raw_id)
        article.replace(
            title=data.title,
            description=data.description,
            text=data.text,
            date=data.date,
        )
        return await self._save(article)

    async def patch_news(self, raw_id: str, data: NewsPatch) -> NewsArticle:
        article = await self.get_news(raw_id)
        article.merge(**data.model_dump(exclude_unset=True))
        return await self._save(article)

    async def delete_news(self, raw_id: str) -> None:
        news_id = parse_news_id(raw_id)
        if not await self._repository.delete(news_id):
            raise EntityNotFoundError("News", news_id)
        logger.info("Deleted news %s", news_id)

    async def _save(self, article: NewsArticle) -> NewsArticle:
        # The article can vanish between the read and the write.
        updated = await self._repository.update(article)
        if updated is None:
            raise EntityNotFoundError("News", article.id)
        return updated
