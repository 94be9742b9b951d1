"""Business logic for friend requests and friendships."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from ..models import FriendAction, FriendshipStatus, Record, new_friendship, now_ts, public_user
from ..store import JsonStore
from .enrichment import enrich_friendship
from .feed_service import accepted_friend_ids

logger = logging.getLogger(__name__)


def _between(a: str, b: str):
    return lambda f: (f.get("from") == a and f.get("to") == b) or (f.get("from") == b and f.get("to") == a)


def _pending(from_id: str | None = None, to_id: str | None = None):
    def _matches(f: Record) -> bool:
        if f.get("status") != FriendshipStatus.PENDING.value:
            return False
        if from_id is not None and f.get("from") != from_id:
            return False
        if to_id is not None and f.get("to") != to_id:
            return False
        return True

    return _matches


def _name_matches(user: Record | None, name: str | None) -> bool:
    if not name:
        return True
    if user is None:
        return False
    return name.lower() in str(user.get("name") or "").lower()


def existing_friendship(store: JsonStore, user_id: str, other_id: str) -> Record | None:
    """Any edge between the pair, pending or accepted, in either direction."""

    return store.find("friendships", _between(user_id, other_id))


def list_friends(store: JsonStore, *, user_id: str, name: str | None = None) -> list[Record]:
    friend_ids = accepted_friend_ids(store, user_id)
    friends = store.scan("users", lambda u: u.get("_id") in friend_ids)
    return [public_user(user) for user in friends if _name_matches(user, name)]


def list_friend_requests(store: JsonStore, *, user_id: str) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    incoming = [enrich_friendship(store, f) for f in store.scan("friendships", _pending(to_id=user_id))]
    outgoing = [enrich_friendship(store, f) for f in store.scan("friendships", _pending(from_id=user_id))]
    return incoming, outgoing


def list_incoming_requests(store: JsonStore, *, user_id: str, name: str | None = None) -> list[dict[str, Any]]:
    requests: list[dict[str, Any]] = []
    for friendship in store.scan("friendships", _pending(to_id=user_id)):
        requester = store.find_by_id("users", friendship.get("from"))
        if not _name_matches(requester, name):
            continue
        requests.append({**friendship, "requester": public_user(requester) if requester else None})
    return requests


def list_outgoing_requests(store: JsonStore, *, user_id: str, name: str | None = None) -> list[dict[str, Any]]:
    requests: list[dict[str, Any]] = []
    for friendship in store.scan("friendships", _pending(from_id=user_id)):
        recipient = store.find_by_id("users", friendship.get("to"))
        if not _name_matches(recipient, name):
            continue
        requests.append({**friendship, "recipient": public_user(recipient) if recipient else None})
    return requests


def send_friend_request(store: JsonStore, *, sender_id: str, recipient_id: str) -> dict[str, Any]:
    """Open a pending request unless any edge already joins the pair."""

    if recipient_id == sender_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot send a friend request to yourself.",
        )

    with store.transaction():
        existing = existing_friendship(store, sender_id, recipient_id)
        if existing is None:
            friendship = store.insert("friendships", new_friendship(from_id=sender_id, to_id=recipient_id))
            logger.info("Friend request %s sent from %s to %s", friendship["_id"], sender_id, recipient_id)
            return enrich_friendship(store, friendship)

    if existing.get("status") == FriendshipStatus.PENDING.value:
        detail = "Friend request already pending."
    elif existing.get("status") == FriendshipStatus.ACCEPTED.value:
        detail = "You are already friends with this user."
    else:
        detail = "Cannot send friend request."
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def respond_to_request(store: JsonStore, *, requester_id: str, recipient_id: str, action: str | None) -> dict[str, Any]:
    """Accept or decline the pending request ``requester_id`` sent to ``recipient_id``.

    Accepting flips the edge to ``ACCEPTED`` and returns it; declining removes
    the edge and returns ``{"declinedFriendshipId": ...}``.
    """

    with store.transaction():
        request = store.find("friendships", _pending(from_id=requester_id, to_id=recipient_id))
        if request is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Incoming friend request not found or already handled.",
            )

        if action == FriendAction.ACCEPT:
            request["status"] = FriendshipStatus.ACCEPTED.value
            request["updatedAt"] = now_ts()
            return enrich_friendship(store, request)

        if action == FriendAction.DECLINE:
            store.remove("friendships", request["_id"])
            return {"declinedFriendshipId": request["_id"]}

    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid action.")


def cancel_friend_request(store: JsonStore, *, sender_id: str, recipient_id: str) -> None:
    with store.transaction():
        request = store.find("friendships", _pending(from_id=sender_id, to_id=recipient_id))
        if request is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Outgoing friend request not found.")
        store.remove("friendships", request["_id"])


def remove_friend(store: JsonStore, *, user_id: str, friend_id: str) -> None:
    pair = _between(user_id, friend_id)
    with store.transaction():
        friendship = store.find(
            "friendships",
            lambda f: pair(f) and f.get("status") == FriendshipStatus.ACCEPTED.value,
        )
        if friendship is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Friendship not found.")
        store.remove("friendships", friendship["_id"])


__all__ = [
    "existing_friendship",
    "list_friends",
    "list_friend_requests",
    "list_incoming_requests",
    "list_outgoing_requests",
    "send_friend_request",
    "respond_to_request",
    "cancel_friend_request",
    "remove_friend",
]
