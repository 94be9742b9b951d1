"""Join stored records with the users and reactions they reference.

Every helper here is best effort: a reference to a user that no longer
exists becomes ``None`` in the view instead of an error, so older posts and
reactions keep rendering after their author disappears.
"""
from __future__ import annotations

from typing import Any

from ..models import Record, TargetType
from ..store import JsonStore


def enrich_author(store: JsonStore, user_id: str | None) -> dict[str, Any] | None:
    user = store.find_by_id("users", user_id)
    if user is None:
        return None
    return {"_id": user["_id"], "name": user.get("name"), "avatarUrl": user.get("avatarUrl")}


def enrich_reaction(store: JsonStore, reaction: Record) -> dict[str, Any]:
    return {**reaction, "author": enrich_author(store, reaction.get("author"))}


def enrich_reactions(store: JsonStore, target_type: TargetType, target_id: str) -> list[dict[str, Any]]:
    """Reactions on a target in table order, each with its author embedded."""

    rows = store.scan(
        "reactions",
        lambda r: r.get("targetType") == target_type.value and r.get("targetId") == target_id,
    )
    return [enrich_reaction(store, reaction) for reaction in rows]


def count_comments(store: JsonStore, post_id: str) -> int:
    return store.count("comments", lambda c: c.get("post") == post_id)


def enrich_post(store: JsonStore, post: Record) -> dict[str, Any]:
    post_id = post["_id"]
    return {
        **post,
        "author": enrich_author(store, post.get("author")),
        "reactions": enrich_reactions(store, TargetType.POST, post_id),
        "commentCount": count_comments(store, post_id),
    }


def enrich_comment(store: JsonStore, comment: Record) -> dict[str, Any]:
    return {
        **comment,
        "author": enrich_author(store, comment.get("author")),
        "reactions": enrich_reactions(store, TargetType.COMMENT, comment["_id"]),
    }


def enrich_friendship(store: JsonStore, friendship: Record) -> dict[str, Any]:
    return {
        **friendship,
        "sender": enrich_author(store, friendship.get("from")),
        "receiver": enrich_author(store, friendship.get("to")),
    }


__all__ = [
    "enrich_author",
    "enrich_reaction",
    "enrich_reactions",
    "count_comments",
    "enrich_post",
    "enrich_comment",
    "enrich_friendship",
]
