from .news import (
    MessageResponse,
    NewsBulkDelete,
    NewsCreate,
    NewsPatch,
    NewsResponse,
    describe_validation_errors,
)

__all__ = [
    "MessageResponse",
    "NewsBulkDelete",
    "NewsCreate",
    "NewsPatch",
    "NewsResponse",
    "describe_validation_errors",
]
