"""Friend request lifecycle over HTTP and its effect on the home feed."""
from __future__ import annotations

import pytest

from codercomm.models import FriendshipStatus


@pytest.fixture
def pair(user_factory, auth_headers):
    ada = user_factory("Ada")
    bo = user_factory("Bo")
    return ada, bo, auth_headers(ada), auth_headers(bo)


def _feed_ids(client, headers):
    return [p["_id"] for p in client.get("/api/posts", headers=headers).json()["data"]["posts"]]


def test_request_accept_then_unfriend(client, store, pair, post_factory):
    ada, bo, ada_headers, bo_headers = pair
    bo_post = post_factory(bo, 0)

    sent = client.post("/api/friends/requests", json={"to": bo["_id"]}, headers=ada_headers)
    assert sent.status_code == 200, sent.text
    friendship = sent.json()["data"]["friendship"]
    assert friendship["from"] == ada["_id"]
    assert friendship["status"] == "PENDING"
    assert friendship["receiver"]["name"] == "Bo"

    # Pending requests do not open the feed.
    assert _feed_ids(client, ada_headers) == []

    overview = client.get("/api/friends/requests", headers=bo_headers).json()["data"]
    assert [f["_id"] for f in overview["incoming"]] == [friendship["_id"]]
    assert overview["outgoing"] == []

    accepted = client.put(f"/api/friends/requests/{ada['_id']}", params={"action": "ACCEPT"}, headers=bo_headers)
    assert accepted.status_code == 200, accepted.text
    assert accepted.json()["data"]["friendship"]["status"] == "ACCEPTED"
    assert accepted.json()["message"] == "Friend request accepted"

    assert _feed_ids(client, ada_headers) == [bo_post["_id"]]
    friends = client.get("/api/friends", headers=bo_headers).json()["data"]
    assert [u["_id"] for u in friends["users"]] == [ada["_id"]]
    assert friends["count"] == 1

    removed = client.delete(f"/api/friends/{ada['_id']}", headers=bo_headers)
    assert removed.status_code == 204
    assert removed.content == b""
    assert store.scan("friendships") == []
    assert _feed_ids(client, ada_headers) == []


def test_decline_removes_request(client, store, pair):
    ada, bo, ada_headers, bo_headers = pair
    client.post("/api/friends/requests", json={"to": bo["_id"]}, headers=ada_headers)
    friendship_id = store.scan("friendships")[0]["_id"]

    declined = client.put(f"/api/friends/requests/{ada['_id']}", params={"action": "DECLINE"}, headers=bo_headers)
    assert declined.status_code == 200
    assert declined.json()["data"] == {"declinedFriendshipId": friendship_id}
    assert store.scan("friendships") == []

    again = client.put(f"/api/friends/requests/{ada['_id']}", params={"action": "ACCEPT"}, headers=bo_headers)
    assert again.status_code == 404


def test_invalid_action_keeps_request(client, store, pair):
    ada, bo, ada_headers, bo_headers = pair
    client.post("/api/friends/requests", json={"to": bo["_id"]}, headers=ada_headers)

    response = client.put(f"/api/friends/requests/{ada['_id']}", params={"action": "MAYBE"}, headers=bo_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid action."
    assert store.scan("friendships")[0]["status"] == FriendshipStatus.PENDING.value


def test_cancel_outgoing_request(client, store, pair):
    ada, bo, ada_headers, _ = pair
    client.post("/api/friends/requests", json={"to": bo["_id"]}, headers=ada_headers)

    outgoing = client.get("/api/friends/requests/outgoing", headers=ada_headers).json()["data"]
    assert outgoing["count"] == 1
    assert outgoing["requests"][0]["recipient"]["_id"] == bo["_id"]

    assert client.delete(f"/api/friends/requests/{bo['_id']}", headers=ada_headers).status_code == 204
    assert store.scan("friendships") == []
    assert client.delete(f"/api/friends/requests/{bo['_id']}", headers=ada_headers).status_code == 404


@pytest.mark.parametrize(
    ("status", "message"),
    [
        (FriendshipStatus.PENDING, "Friend request already pending."),
        (FriendshipStatus.ACCEPTED, "You are already friends with this user."),
    ],
)
def test_existing_edge_blocks_new_request(client, pair, friendship_factory, status, message):
    ada, bo, _, bo_headers = pair
    friendship_factory(ada, bo, status)

    # Reverse direction is blocked too.
    response = client.post("/api/friends/requests", json={"to": ada["_id"]}, headers=bo_headers)
    assert response.status_code == 400
    assert response.json()["message"] == message


def test_cannot_befriend_self(client, pair):
    ada, _, ada_headers, _ = pair
    response = client.post("/api/friends/requests", json={"to": ada["_id"]}, headers=ada_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "You cannot send a friend request to yourself."


def test_name_filters(client, user_factory, friendship_factory, auth_headers):
    me = user_factory("Una")
    friendship_factory(me, user_factory("Alice"))
    friendship_factory(me, user_factory("Bob"))
    friendship_factory(user_factory("Alina"), me, FriendshipStatus.PENDING)
    friendship_factory(user_factory("Carl"), me, FriendshipStatus.PENDING)
    headers = auth_headers(me)

    friends = client.get("/api/friends", params={"name": "ALI"}, headers=headers).json()["data"]["users"]
    assert [u["name"] for u in friends] == ["Alice"]

    incoming = client.get("/api/friends/requests/incoming", params={"name": "ali"}, headers=headers).json()["data"]
    assert [r["requester"]["name"] for r in incoming["requests"]] == ["Alina"]

    everyone = client.get("/api/friends/requests/incoming", headers=headers).json()["data"]
    assert everyone["count"] == 2


def test_unfriend_unknown_pair(client, pair):
    _, bo, ada_headers, _ = pair
    response = client.delete(f"/api/friends/{bo['_id']}", headers=ada_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Friendship not found."
