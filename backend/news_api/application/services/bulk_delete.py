"""Bulk delete — one independent deletion per id, run concurrently."""

import asyncio
import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass, field
from typing import Any

from news_api.application.interfaces import NewsRepository
from news_api.domain.entities import parse_news_id
from news_api.domain.exceptions import InvalidNewsIdError

logger = logging.getLogger(__name__)

RepositoryScope = Callable[[], AbstractAsyncContextManager[NewsRepository]]


@dataclass
class BulkDeleteResult:
    """Aggregate outcome of a bulk delete.

    ``failed`` holds ids that were malformed or matched nothing. Deletions
    listed in ``deleted`` are committed regardless of any failure.
    """

    deleted: list[str] = field(default_factory=list)
    failed: list[Any] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failed


class BulkDeleteOrchestrator:
    """Deletes many articles at once, each in its own unit of work.

    ``repository_scope`` opens a repository bound to a fresh session and
    commits it on exit, so concurrent deletions never share a session and a
    late failure cannot undo earlier ones.
    """

    def __init__(self, repository_scope: RepositoryScope):
        self._repository_scope = repository_scope

    async def delete_many(self, news_ids: list[Any]) -> BulkDeleteResult:
        outcomes = await asyncio.gather(
            *(self._delete_one(raw_id) for raw_id in news_ids),
            return_exceptions=True,
        )

        result = BulkDeleteResult()
        errors: list[BaseException] = []
        for raw_id, outcome in zip(news_ids, outcomes):
            if isinstance(outcome, BaseException):
                errors.append(outcome)
            elif outcome:
                result.deleted.append(outcome)
            else:
                result.failed.append(raw_id)

        if errors:
            logger.error(
                "Bulk delete hit %d storage error(s); %d deletion(s) already committed",
                len(errors),
                len(result.deleted),
            )
            raise errors[0]

        if result.failed:
            logger.warning(
                "Bulk delete incomplete: deleted=%d failed=%s", len(result.deleted), result.failed
            )
        else:
            logger.info("Bulk delete removed %d news", len(result.deleted))
        return result

    async def _delete_one(self, raw_id: Any) -> str | None:
        try:
            news_id = parse_news_id(raw_id)
        except InvalidNewsIdError:
            return None
        async with self._repository_scope() as repository:
            deleted = await repository.delete(news_id)
        return news_id if deleted else None
