"""Schemas for user profiles and the user directory."""
from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, Field, HttpUrl, TypeAdapter

from .common import CamelModel

_http_url = TypeAdapter(HttpUrl)


def _checked_url(value: str) -> str:
    """Validate as an http(s) URL but keep the submitted text unchanged."""

    try:
        _http_url.validate_python(value)
    except ValueError as exc:
        raise ValueError("Input should be a valid URL") from exc
    return value


LinkUrl = Annotated[str, AfterValidator(_checked_url)]


class AuthorSummary(CamelModel):
    """Minimal identity embedded in posts, comments, reactions and requests."""

    id: str = Field(..., alias="_id")
    name: str | None = None
    avatar_url: str | None = None


class UserResponse(CamelModel):
    id: str = Field(..., alias="_id")
    name: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    cover_url: str | None = None
    about_me: str | None = None
    city: str | None = None
    country: str | None = None
    company: str | None = None
    job_title: str | None = None
    facebook_link: str | None = None
    instagram_link: str | None = None
    linkedin_link: str | None = None
    twitter_link: str | None = None
    created_at: str | None = None


class UserDetailResponse(UserResponse):
    post_count: int = 0


class UserUpdateRequest(CamelModel):
    name: str | None = Field(default=None, min_length=1)
    avatar_url: LinkUrl | None = None
    cover_url: LinkUrl | None = None
    about_me: str | None = None
    city: str | None = None
    country: str | None = None
    company: str | None = None
    job_title: str | None = None
    facebook_link: LinkUrl | None = None
    instagram_link: LinkUrl | None = None
    linkedin_link: LinkUrl | None = None
    twitter_link: LinkUrl | None = None


class UserData(CamelModel):
    user: UserResponse


class UserDetailData(CamelModel):
    user: UserDetailResponse


class UserListData(CamelModel):
    users: list[UserResponse]
    total_pages: int
    count: int
    page: int | None = None
    limit: int | None = None


__all__ = [
    "AuthorSummary",
    "UserResponse",
    "UserDetailResponse",
    "UserUpdateRequest",
    "UserData",
    "UserDetailData",
    "UserListData",
]
