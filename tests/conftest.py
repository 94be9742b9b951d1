"""Shared fixtures: an isolated store and app per test."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from codercomm.config import Settings
from codercomm.main import create_app
from codercomm.models import FriendshipStatus, Record, TargetType, new_id
from codercomm.services.auth_service import create_access_token
from codercomm.store import JsonStore

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def ts(minutes: int) -> str:
    """Timestamp ``minutes`` after a fixed base, in the stored string format."""

    return (BASE_TIME + timedelta(minutes=minutes)).isoformat().replace("+00:00", "Z")


@pytest.fixture
def settings() -> Settings:
    return Settings(response_delay_ms=0, persist_changes=False, jwt_secret="test-secret-key")


@pytest.fixture
def store() -> JsonStore:
    return JsonStore()


@pytest.fixture
def client(settings: Settings, store: JsonStore) -> Iterator[TestClient]:
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(settings: Settings) -> Callable[[Record], dict[str, str]]:
    def _headers(user: Record) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user['_id'], settings)}"}

    return _headers


@pytest.fixture
def user_factory(store: JsonStore) -> Callable[..., Record]:
    def _factory(name: str, **fields) -> Record:
        user = {
            "_id": new_id(),
            "name": name,
            "email": f"{name.lower()}@example.test",
            "password": "test-hash",
            "avatarUrl": f"https://example.test/{name.lower()}.png",
            "createdAt": ts(0),
            **fields,
        }
        return store.insert("users", user)

    return _factory


@pytest.fixture
def post_factory(store: JsonStore) -> Callable[..., Record]:
    def _factory(author: Record | str, minutes: int, content: str = "hello") -> Record:
        author_id = author if isinstance(author, str) else author["_id"]
        post = {
            "_id": new_id(),
            "author": author_id,
            "content": content,
            "image": None,
            "createdAt": ts(minutes),
            "updatedAt": ts(minutes),
        }
        return store.insert("posts", post)

    return _factory


@pytest.fixture
def comment_factory(store: JsonStore) -> Callable[..., Record]:
    def _factory(post: Record, author: Record | str, minutes: int, content: str = "nice") -> Record:
        author_id = author if isinstance(author, str) else author["_id"]
        comment = {
            "_id": new_id(),
            "post": post["_id"],
            "author": author_id,
            "content": content,
            "createdAt": ts(minutes),
            "updatedAt": ts(minutes),
        }
        return store.insert("comments", comment)

    return _factory


@pytest.fixture
def reaction_factory(store: JsonStore) -> Callable[..., Record]:
    def _factory(target: Record, author: Record | str, emoji: str, target_type: TargetType = TargetType.POST) -> Record:
        author_id = author if isinstance(author, str) else author["_id"]
        reaction = {
            "_id": new_id(),
            "targetType": target_type.value,
            "targetId": target["_id"],
            "author": author_id,
            "emoji": emoji,
            "createdAt": ts(0),
        }
        return store.insert("reactions", reaction)

    return _factory


@pytest.fixture
def friendship_factory(store: JsonStore) -> Callable[..., Record]:
    def _factory(sender: Record, recipient: Record, status: FriendshipStatus = FriendshipStatus.ACCEPTED) -> Record:
        edge = {
            "_id": new_id(),
            "from": sender["_id"],
            "to": recipient["_id"],
            "status": status.value,
            "createdAt": ts(0),
            "updatedAt": ts(0),
        }
        return store.insert("friendships", edge)

    return _factory
