"""Reaction toggling: create, switch emoji, remove."""
from __future__ import annotations

import pytest
from fastapi import HTTPException

from codercomm.services.reaction_service import toggle_reaction


def test_toggle_creates_switches_and_removes(store, user_factory, post_factory):
    reactor = user_factory("Rae")
    post = post_factory(user_factory("Una"), 0)

    created = toggle_reaction(store, author=reactor, target_type="POST", target_id=post["_id"], emoji="👍")
    assert created["emoji"] == "👍"
    assert created["author"]["name"] == "Rae"
    assert len(store.scan("reactions")) == 1

    switched = toggle_reaction(store, author=reactor, target_type="POST", target_id=post["_id"], emoji="❤️")
    assert switched["_id"] == created["_id"]
    assert switched["emoji"] == "❤️"
    assert store.scan("reactions")[0]["emoji"] == "❤️"

    removed = toggle_reaction(store, author=reactor, target_type="POST", target_id=post["_id"], emoji="❤️")
    assert removed["_id"] == created["_id"]
    assert removed["emoji"] is None
    assert store.scan("reactions") == []


def test_same_emoji_twice_removes(store, user_factory, post_factory):
    reactor = user_factory("Rae")
    post = post_factory(reactor, 0)

    toggle_reaction(store, author=reactor, target_type="POST", target_id=post["_id"], emoji="👍")
    toggle_reaction(store, author=reactor, target_type="POST", target_id=post["_id"], emoji="👍")
    assert store.scan("reactions") == []


def test_reactions_are_keyed_per_author_and_target_type(store, user_factory, post_factory):
    first = user_factory("Rae")
    second = user_factory("Sam")
    post = post_factory(first, 0)

    toggle_reaction(store, author=first, target_type="POST", target_id=post["_id"], emoji="👍")
    toggle_reaction(store, author=second, target_type="POST", target_id=post["_id"], emoji="👍")
    toggle_reaction(store, author=first, target_type="COMMENT", target_id=post["_id"], emoji="👍")

    assert len(store.scan("reactions")) == 3


@pytest.mark.parametrize(
    "target_type, target_id, emoji",
    [("STORY", "p1", "👍"), ("POST", None, "👍"), ("POST", "p1", None), (None, "p1", "👍")],
)
def test_invalid_requests_are_rejected(store, user_factory, target_type, target_id, emoji):
    with pytest.raises(HTTPException) as exc:
        toggle_reaction(store, author=user_factory("Rae"), target_type=target_type, target_id=target_id, emoji=emoji)
    assert exc.value.status_code == 400
    assert store.scan("reactions") == []


def test_reaction_endpoint(client, user_factory, post_factory, auth_headers):
    reactor = user_factory("Rae")
    post = post_factory(reactor, 0)
    headers = auth_headers(reactor)
    body = {"targetType": "POST", "targetId": post["_id"], "emoji": "👍"}

    response = client.post("/api/reactions", json=body, headers=headers)
    assert response.status_code == 200, response.text
    reaction = response.json()["data"]["reaction"]
    assert reaction["emoji"] == "👍"
    assert reaction["targetType"] == "POST"
    assert reaction["author"]["_id"] == reactor["_id"]

    toggled_off = client.post("/api/reactions", json=body, headers=headers)
    assert toggled_off.json()["data"]["reaction"]["emoji"] is None

    invalid = client.post("/api/reactions", json={"targetType": "POST"}, headers=headers)
    assert invalid.status_code == 400
    assert invalid.json() == {
        "success": False,
        "errors": ["Invalid reaction request"],
        "message": "Invalid reaction request",
    }
