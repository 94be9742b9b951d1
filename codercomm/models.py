"""Record shapes stored in the JSON tables.

Records are plain dictionaries with camelCase keys so the file on disk stays
compatible with the frontend's fixtures. The helpers below build new records
and read their timestamps.
"""
from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum
from typing import Any
from uuid import uuid4

Record = dict[str, Any]


class TargetType(StrEnum):
    POST = "POST"
    COMMENT = "COMMENT"


class FriendshipStatus(StrEnum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"


class FriendAction(StrEnum):
    ACCEPT = "ACCEPT"
    DECLINE = "DECLINE"


_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def new_id() -> str:
    return str(uuid4())


def now_ts() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""

    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_ts(value: Any) -> datetime:
    """Parse a stored timestamp; unreadable values sort as the oldest possible."""

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return _EPOCH
    else:
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def new_user(*, email: str, password_hash: str, name: str) -> Record:
    return {
        "_id": new_id(),
        "email": email,
        "password": password_hash,
        "name": name,
        "createdAt": now_ts(),
    }


def new_post(*, author_id: str, content: str, image: str | None = None) -> Record:
    timestamp = now_ts()
    return {
        "_id": new_id(),
        "content": content,
        "image": image or None,
        "author": author_id,
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }


def new_comment(*, post_id: str, author_id: str, content: str) -> Record:
    timestamp = now_ts()
    return {
        "_id": new_id(),
        "content": content,
        "post": post_id,
        "author": author_id,
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }


def new_reaction(*, target_type: TargetType, target_id: str, author_id: str, emoji: str) -> Record:
    return {
        "_id": new_id(),
        "targetType": target_type.value,
        "targetId": target_id,
        "emoji": emoji,
        "author": author_id,
        "createdAt": now_ts(),
    }


def new_friendship(*, from_id: str, to_id: str) -> Record:
    timestamp = now_ts()
    return {
        "_id": new_id(),
        "from": from_id,
        "to": to_id,
        "status": FriendshipStatus.PENDING.value,
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }


def public_user(user: Record) -> Record:
    """Return a copy of ``user`` without the password hash."""

    return {key: value for key, value in user.items() if key != "password"}


__all__ = [
    "Record",
    "TargetType",
    "FriendshipStatus",
    "FriendAction",
    "new_id",
    "now_ts",
    "parse_ts",
    "new_user",
    "new_post",
    "new_comment",
    "new_reaction",
    "new_friendship",
    "public_user",
]
