"""News CRUD endpoints."""

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status
from pydantic import ValidationError

from news_api.application.schemas import (
    MessageResponse,
    NewsBulkDelete,
    NewsCreate,
    NewsPatch,
    NewsResponse,
)
from news_api.application.services import BulkDeleteOrchestrator, NewsService
from news_api.domain.exceptions import EntityNotFoundError, InvalidNewsIdError, InvalidQueryError
from news_api.infrastructure.dependencies import get_bulk_delete_orchestrator, get_news_service

router = APIRouter(prefix="/news", tags=["News"])

INVALID_NEWS_ID = "Invalid news ID"
NEWS_NOT_FOUND = "News not found"
NEWS_IDS_NOT_ARRAY = "News IDs must be provided as an array"
SOME_NEWS_NOT_DELETED = "Some news could not be found or deleted"


@router.get("", response_model=list[NewsResponse])
async def list_news(
    date: str | None = Query(None, description="Only news published on this UTC day"),
    title: str | None = Query(None, description="Case-insensitive title substring"),
    sort_by: str | None = Query(None, alias="sortBy", description="date, title, description or text"),
    order_by: str | None = Query(None, alias="orderBy", description="'desc' for descending"),
    service: NewsService = Depends(get_news_service),
) -> list[NewsResponse]:
    """Retrieve every article matching the filters, sorted."""
    try:
        articles = await service.list_news(
            date=date, title=title, sort_by=sort_by, order_by=order_by
        )
    except InvalidQueryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return [NewsResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/{news_id}", response_model=NewsResponse)
async def get_news(
    news_id: str,
    service: NewsService = Depends(get_news_service),
) -> NewsResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_news(news_id)
    except InvalidNewsIdError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_NEWS_ID)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NEWS_NOT_FOUND)
    return NewsResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=NewsResponse, status_code=status.HTTP_201_CREATED)
async def create_news(
    data: NewsCreate,
    service: NewsService = Depends(get_news_service),
) -> NewsResponse:
    """Create a new article."""
    article = await service.create_news(data)
    return NewsResponse.model_validate(article, from_attributes=True)


@router.put("/{news_id}", response_model=NewsResponse)
async def replace_news(
    news_id: str,
    data: NewsCreate,
    service: NewsService = Depends(get_news_service),
) -> NewsResponse:
    """Replace every field of an existing article."""
    try:
        article = await service.replace_news(news_id, data)
    except InvalidNewsIdError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_NEWS_ID)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NEWS_NOT_FOUND)
    return NewsResponse.model_validate(article, from_attributes=True)


@router.patch("/{news_id}", response_model=NewsResponse)
async def patch_news(
    news_id: str,
    data: NewsPatch | None = Body(None),
    service: NewsService = Depends(get_news_service),
) -> NewsResponse:
    """Update only the supplied fields of an article."""
    try:
        article = await service.patch_news(news_id, data if data is not None else NewsPatch())
    except InvalidNewsIdError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_NEWS_ID)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NEWS_NOT_FOUND)
    return NewsResponse.model_validate(article, from_attributes=True)


@router.delete("/{news_id}", response_model=MessageResponse)
async def delete_news(
    news_id: str,
    service: NewsService = Depends(get_news_service),
) -> MessageResponse:
    """Delete an article by ID. Malformed IDs are reported as not found."""
    try:
        await service.delete_news(news_id)
    except (InvalidNewsIdError, EntityNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NEWS_NOT_FOUND)
    return MessageResponse(message="News deleted successfully")


@router.delete("", response_model=MessageResponse)
async def delete_many_news(
    request: Request,
    orchestrator: BulkDeleteOrchestrator = Depends(get_bulk_delete_orchestrator),
) -> MessageResponse:
    """Delete several articles. Not atomic: deletions that succeed are kept
    even when others fail. A missing or malformed body is rejected like any
    other non-array input."""
    try:
        body = NewsBulkDelete.model_validate_json(await request.body())
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NEWS_IDS_NOT_ARRAY)

    result = await orchestrator.delete_many(body.news_ids)
    if not result.succeeded:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SOME_NEWS_NOT_DELETED)
    return MessageResponse(message="All news deleted successfully")
