from .base import Base
from .session import engine, async_session_factory, get_db_session, get_session_factory
from .models import NewsModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "get_session_factory",
    "NewsModel",
]
