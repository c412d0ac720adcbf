from .news import NewsModel

__all__ = [
    "NewsModel",
]
