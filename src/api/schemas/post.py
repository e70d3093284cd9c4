"""Pydantic schemas for Post API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for writing a post."""

    text: str = Field(..., min_length=1)


class CommentCreate(BaseModel):
    """Schema for commenting on a post."""

    text: str = Field(..., min_length=1)


class LikeResponse(BaseModel):
    """A like, keyed by the account that gave it."""

    user: UUID


class CommentResponse(BaseModel):
    """Schema for a comment."""

    id: UUID
    user: UUID
    text: str
    name: str | None = None
    avatar: str | None = None
    created_at: datetime


class PostResponse(BaseModel):
    """Schema for Post response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "789e4567-e89b-12d3-a456-426614174000",
                "user": "123e4567-e89b-12d3-a456-426614174000",
                "text": "Shipped the new feed today",
                "name": "Ada Lovelace",
                "avatar": None,
                "likes": [{"user": "123e4567-e89b-12d3-a456-426614174000"}],
                "comments": [],
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user: UUID
    text: str
    name: str | None = None
    avatar: str | None = None
    likes: list[LikeResponse] = []
    comments: list[CommentResponse] = []
    created_at: datetime


class PostListResponse(BaseModel):
    """Schema for list of Posts."""

    data: list[PostResponse]


class PostDetailResponse(BaseModel):
    """Schema for single Post."""

    data: PostResponse


class LikeListResponse(BaseModel):
    """Likes of a post after a change."""

    data: list[LikeResponse]


class CommentListResponse(BaseModel):
    """Comments of a post after a change."""

    data: list[CommentResponse]
