"""Candidate selection for paginated listings.

Each listing (home feed, a user's posts, a post's comments) is a
:class:`FeedSelector` that yields the full ordered candidate sequence. The
shared :func:`list_page` pipeline then slices one page with the cursor
paginator and enriches only the items on that page.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from ..models import FriendshipStatus, Record, parse_ts
from ..store import JsonStore
from .pagination import Page, paginate


def newest_first(records: Iterable[Record]) -> list[Record]:
    """Sort by ``createdAt`` descending; equal timestamps keep scan order."""

    return sorted(records, key=lambda record: parse_ts(record.get("createdAt")), reverse=True)


def accepted_friend_ids(store: JsonStore, user_id: str) -> set[str]:
    """Ids of users joined to ``user_id`` by an accepted edge in either direction."""

    friend_ids: set[str] = set()
    for edge in store.scan("friendships", lambda f: f.get("status") == FriendshipStatus.ACCEPTED.value):
        if edge.get("from") == user_id:
            friend_ids.add(edge.get("to"))
        elif edge.get("to") == user_id:
            friend_ids.add(edge.get("from"))
    return friend_ids


class FeedSelector(ABC):
    """Produces the ordered, unpaginated candidates for one listing."""

    table: str

    @abstractmethod
    def matches(self, store: JsonStore) -> Callable[[Record], bool]:
        raise NotImplementedError

    def candidates(self, store: JsonStore) -> list[Record]:
        return newest_first(store.scan(self.table, self.matches(store)))


@dataclass(frozen=True)
class HomeFeed(FeedSelector):
    """Posts by the viewer and by everyone they are friends with."""

    user_id: str
    table = "posts"

    def matches(self, store: JsonStore) -> Callable[[Record], bool]:
        visible_authors = accepted_friend_ids(store, self.user_id) | {self.user_id}
        return lambda post: post.get("author") in visible_authors


@dataclass(frozen=True)
class UserPosts(FeedSelector):
    user_id: str
    table = "posts"

    def matches(self, store: JsonStore) -> Callable[[Record], bool]:
        return lambda post: post.get("author") == self.user_id


@dataclass(frozen=True)
class PostComments(FeedSelector):
    post_id: str
    table = "comments"

    def matches(self, store: JsonStore) -> Callable[[Record], bool]:
        return lambda comment: comment.get("post") == self.post_id


def list_page(
    store: JsonStore,
    selector: FeedSelector,
    *,
    cursor: str | None,
    limit: int,
    enrich: Callable[[JsonStore, Record], dict[str, Any]],
) -> Page[dict[str, Any]]:
    """Select, paginate and enrich one page of a listing."""

    page = paginate(selector.candidates(store), cursor=cursor, limit=limit)
    return Page(
        items=[enrich(store, record) for record in page.items],
        next_cursor=page.next_cursor,
        has_more=page.has_more,
    )


__all__ = [
    "FeedSelector",
    "HomeFeed",
    "UserPosts",
    "PostComments",
    "accepted_friend_ids",
    "newest_first",
    "list_page",
]
