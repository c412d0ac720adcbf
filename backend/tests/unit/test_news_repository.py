"""Unit tests for the SQL rendering of the news title filter."""

from sqlalchemy.dialects import postgresql, sqlite

from news_api.infrastructure.database import NewsModel
from news_api.infrastructure.database.repositories.news_repository import _escape_like


def _title_filter():
    return NewsModel.title.ilike(f"%{_escape_like('50%_off')}%", escape="\\")


def test_escape_like_neutralises_wildcards():
    assert _escape_like("50%_off\\") == "50\\%\\_off\\\\"


def test_postgresql_uses_native_ilike():
    sql = str(_title_filter().compile(dialect=postgresql.dialect()))
    assert "ILIKE" in sql
    assert "lower(" not in sql


def test_sqlite_falls_back_to_lower_like():
    sql = str(_title_filter().compile(dialect=sqlite.dialect()))
    assert "lower(news.title) LIKE lower(" in sql
