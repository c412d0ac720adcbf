from .bulk_delete import BulkDeleteOrchestrator, BulkDeleteResult
from .news_query_builder import build_news_query, day_window
from .news_service import NewsService

__all__ = [
    "BulkDeleteOrchestrator",
    "BulkDeleteResult",
    "NewsService",
    "build_news_query",
    "day_window",
]
