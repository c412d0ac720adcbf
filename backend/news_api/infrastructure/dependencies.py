"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from news_api.application.interfaces import NewsRepository
from news_api.application.services import BulkDeleteOrchestrator, NewsService
from news_api.application.services.bulk_delete import RepositoryScope
from news_api.infrastructure.database.session import get_db_session, get_session_factory
from news_api.infrastructure.database.repositories import SQLAlchemyNewsRepository


def news_repository_scope(session_factory: async_sessionmaker[AsyncSession]) -> RepositoryScope:
    """Build a factory of self-committing repositories, one session each."""

    @asynccontextmanager
    async def scope() -> AsyncIterator[NewsRepository]:
        async with session_factory() as session:
            try:
                yield SQLAlchemyNewsRepository(session)
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return scope


async def get_news_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[NewsRepository, None]:
    """Provides the request-scoped news repository."""
    yield SQLAlchemyNewsRepository(session)


async def get_news_service(
    repository: NewsRepository = Depends(get_news_repository),
) -> AsyncGenerator[NewsService, None]:
    """Provides a NewsService instance with its repository wired up."""
    yield NewsService(repository)


def get_bulk_delete_orchestrator(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> BulkDeleteOrchestrator:
    """Provides a BulkDeleteOrchestrator that opens one session per deletion."""
    return BulkDeleteOrchestrator(news_repository_scope(session_factory))
