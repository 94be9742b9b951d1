"""User profile lookups and updates."""
from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from ..constants import USERS_PAGE_LIMIT
from ..models import Record, public_user
from ..schemas import UserUpdateRequest
from ..store import JsonStore
from .pagination import OffsetPage, paginate_offset


def get_profile(store: JsonStore, user_id: str) -> dict[str, Any]:
    """Public profile of ``user_id`` with the number of posts they authored."""

    user = store.find_by_id("users", user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    post_count = store.count("posts", lambda p: p.get("author") == user_id)
    return {**public_user(user), "postCount": post_count}


def list_users(
    store: JsonStore,
    *,
    viewer_id: str,
    page: int = 0,
    limit: int = USERS_PAGE_LIMIT,
) -> OffsetPage[Record]:
    """Directory of every user except the viewer."""

    others = [public_user(user) for user in store.scan("users", lambda u: u.get("_id") != viewer_id)]
    return paginate_offset(others, page=page, limit=limit)


def update_profile(store: JsonStore, *, user_id: str, payload: UserUpdateRequest) -> Record:
    """Apply the fields the client actually sent and return the public profile."""

    update_data = payload.model_dump(by_alias=True, exclude_unset=True)

    with store.transaction():
        user = store.find_by_id("users", user_id)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        user.update(update_data)

    return public_user(user)


__all__ = ["get_profile", "list_users", "update_profile"]
