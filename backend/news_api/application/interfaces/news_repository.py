"""Abstract repository interface (port) for news persistence."""

from abc import ABC, abstractmethod

from news_api.domain.entities import NewsArticle, NewsQuery


class NewsRepository(ABC):
    """Port for news persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def find(self, query: NewsQuery) -> list[NewsArticle]:
        """Return every article matching the query's filters, in its sort order."""
        ...

    @abstractmethod
    async def get_by_id(self, news_id: str) -> NewsArticle | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def create(self, article: NewsArticle) -> NewsArticle:
        """Persist a new article and return it as stored."""
        ...

    @abstractmethod
    async def update(self, article: NewsArticle) -> NewsArticle | None:
        """Overwrite a stored article. Returns None if it no longer exists."""
        ...

    @abstractmethod
    async def delete(self, news_id: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
