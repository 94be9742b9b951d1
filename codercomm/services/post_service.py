"""Business logic for posts and comments stored in the JSON tables."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from ..constants import COMMENTS_PAGE_LIMIT, FEED_PAGE_LIMIT
from ..models import Record, new_comment, new_post
from ..store import JsonStore
from .enrichment import enrich_comment, enrich_post
from .feed_service import HomeFeed, PostComments, UserPosts, list_page
from .pagination import Page

logger = logging.getLogger(__name__)


def _get_user_or_404(store: JsonStore, user_id: str) -> Record:
    user = store.find_by_id("users", user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


def _get_post_or_404(store: JsonStore, post_id: str) -> Record:
    post = store.find_by_id("posts", post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


def list_home_feed(
    store: JsonStore,
    *,
    viewer_id: str,
    cursor: str | None = None,
    limit: int = FEED_PAGE_LIMIT,
) -> Page[dict[str, Any]]:
    """Posts by the viewer and their accepted friends, newest first."""

    return list_page(store, HomeFeed(viewer_id), cursor=cursor, limit=limit, enrich=enrich_post)


def list_user_posts(
    store: JsonStore,
    *,
    user_id: str,
    cursor: str | None = None,
    limit: int = FEED_PAGE_LIMIT,
) -> Page[dict[str, Any]]:
    _get_user_or_404(store, user_id)
    return list_page(store, UserPosts(user_id), cursor=cursor, limit=limit, enrich=enrich_post)


def list_post_comments(
    store: JsonStore,
    *,
    post_id: str,
    cursor: str | None = None,
    limit: int = COMMENTS_PAGE_LIMIT,
) -> Page[dict[str, Any]]:
    return list_page(store, PostComments(post_id), cursor=cursor, limit=limit, enrich=enrich_comment)


def create_post_record(store: JsonStore, *, author: Record, content: str | None, image: str | None = None) -> dict[str, Any]:
    """Create a post for ``author`` and return it enriched."""

    text = (content or "").strip()
    if not text:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Post content cannot be empty")

    with store.transaction():
        # The posts table is kept newest first.
        post = store.insert("posts", new_post(author_id=author["_id"], content=text, image=image), prepend=True)

    logger.info("User %s created post %s", author["_id"], post["_id"])
    return enrich_post(store, post)


def create_post_comment(store: JsonStore, *, post_id: str, author: Record, content: str | None) -> dict[str, Any]:
    if not content or not content.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Comment content cannot be empty")

    with store.transaction():
        _get_post_or_404(store, post_id)
        comment = store.insert("comments", new_comment(post_id=post_id, author_id=author["_id"], content=content))

    return enrich_comment(store, comment)


__all__ = [
    "list_home_feed",
    "list_user_posts",
    "list_post_comments",
    "create_post_record",
    "create_post_comment",
]
