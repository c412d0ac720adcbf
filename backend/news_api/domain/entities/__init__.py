from .news import NewsArticle, as_utc, parse_news_id
from .news_query import NewsQuery, SortField, SortOrder

__all__ = [
    "NewsArticle",
    "as_utc",
    "parse_news_id",
    "NewsQuery",
    "SortField",
    "SortOrder",
]
