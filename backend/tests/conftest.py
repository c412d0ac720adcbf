"""Shared fixtures — an isolated SQLite database and an HTTP client per test."""

import os

os.environ.setdefault("APP_ENV", "test")

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from news_api.domain.entities import NewsArticle  # noqa: E402
from news_api.infrastructure.database import Base, get_session_factory  # noqa: E402
from news_api.infrastructure.database.repositories import SQLAlchemyNewsRepository  # noqa: E402
from news_api.main import app  # noqa: E402


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """A fresh file-backed SQLite database; separate sessions get separate connections."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'news.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory):
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seed(session_factory):
    """Insert articles directly through the repository and commit them."""

    async def _seed(*articles: NewsArticle) -> list[NewsArticle]:
        async with session_factory() as session:
            repo = SQLAlchemyNewsRepository(session)
            stored = [await repo.create(article) for article in articles]
            await session.commit()
        return stored

    return _seed
