"""Schemas for posts, comments and the reactions attached to them."""
from __future__ import annotations

from pydantic import Field

from ..models import TargetType
from .common import CamelModel
from .users import AuthorSummary


class ReactionResponse(CamelModel):
    id: str = Field(..., alias="_id")
    target_type: TargetType
    target_id: str
    emoji: str | None = None
    author: AuthorSummary | None = None
    created_at: str | None = None


class PostCreate(CamelModel):
    content: str | None = None
    image: str | None = None


class PostResponse(CamelModel):
    id: str = Field(..., alias="_id")
    content: str
    image: str | None = None
    author: AuthorSummary | None = None
    created_at: str | None = None
    updated_at: str | None = None
    reactions: list[ReactionResponse] = Field(default_factory=list)
    comment_count: int = 0


class PostData(CamelModel):
    post: PostResponse


class PostFeedData(CamelModel):
    posts: list[PostResponse]
    next_cursor: str | None = None
    has_more: bool = False


class CommentCreate(CamelModel):
    content: str | None = None


class CommentResponse(CamelModel):
    id: str = Field(..., alias="_id")
    content: str
    post: str
    author: AuthorSummary | None = None
    created_at: str | None = None
    updated_at: str | None = None
    reactions: list[ReactionResponse] = Field(default_factory=list)


class CommentData(CamelModel):
    comment: CommentResponse


class CommentListData(CamelModel):
    comments: list[CommentResponse]
    next_cursor: str | None = None
    has_more: bool = False


__all__ = [
    "ReactionResponse",
    "PostCreate",
    "PostResponse",
    "PostData",
    "PostFeedData",
    "CommentCreate",
    "CommentResponse",
    "CommentData",
    "CommentListData",
]
