"""Pydantic DTOs (Data Transfer Objects) for the News feature."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from news_api.domain.entities.news import (
    DESCRIPTION_MAX_LENGTH,
    TEXT_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)

_REQUEST_SECTIONS = frozenset({"body", "query", "path", "header"})


def _reject_null(value: Any) -> Any:
    # Absent fields keep their default; only an explicit null reaches here.
    if value is None:
        raise PydanticCustomError("null_not_allowed", "must not be null")
    return value


class NewsCreate(BaseModel):
    """Schema for creating or fully replacing an article — unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, examples=["Budget approved"])
    description: str = Field(..., min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    text: str = Field(..., min_length=1, max_length=TEXT_MAX_LENGTH)
    date: datetime | None = Field(None, examples=["2024-03-25T09:30:00Z"])

    @field_validator("date", mode="before")
    @classmethod
    def _date_not_null(cls, value: Any) -> Any:
        return _reject_null(value)


class NewsPatch(BaseModel):
    """Schema for a partial update — every field optional, unknown fields ignored."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    text: str | None = Field(None, min_length=1, max_length=TEXT_MAX_LENGTH)
    date: datetime | None = None

    @field_validator("title", "description", "text", "date", mode="before")
    @classmethod
    def _fields_not_null(cls, value: Any) -> Any:
        return _reject_null(value)


class NewsResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    description: str
    text: str
    date: datetime

    model_config = {"from_attributes": True}


class NewsBulkDelete(BaseModel):
    """Body of the bulk delete request."""

    news_ids: list[Any] = Field(..., alias="newsIds")


class MessageResponse(BaseModel):
    message: str


def describe_validation_errors(errors: Iterable[Mapping[str, Any]]) -> list[str]:
    """Turn pydantic error records into one readable message per violation.

    ``{"loc": ("body", "text"), "type": "missing"}`` becomes ``'"text" is required'``.
    """
    messages: list[str] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_SECTIONS:
            loc = loc[1:]
        name = ".".join(loc) or "body"
        error_type = error.get("type")
        if error_type == "missing":
            detail = "is required"
        elif error_type == "extra_forbidden":
            detail = "is not allowed"
        elif error_type == "json_invalid":
            name, detail = "body", "must be valid JSON"
        else:
            msg = str(error.get("msg", "is invalid"))
            # Keep acronyms such as "UUID" intact.
            detail = msg if msg[:2].isupper() else msg[:1].lower() + msg[1:]
        messages.append(f'"{name}" {detail}')
    return messages
