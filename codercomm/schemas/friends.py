"""Schemas for friend requests and friend listings."""
from __future__ import annotations

from pydantic import Field

from ..models import FriendshipStatus
from .common import CamelModel
from .users import AuthorSummary, UserResponse


class FriendRequestPayload(CamelModel):
    to: str = Field(..., min_length=1)


class FriendshipResponse(CamelModel):
    id: str = Field(..., alias="_id")
    from_id: str = Field(..., alias="from")
    to: str
    status: FriendshipStatus
    created_at: str | None = None
    updated_at: str | None = None
    sender: AuthorSummary | None = None
    receiver: AuthorSummary | None = None


class IncomingRequestResponse(FriendshipResponse):
    requester: UserResponse | None = None


class OutgoingRequestResponse(FriendshipResponse):
    recipient: UserResponse | None = None


class FriendshipData(CamelModel):
    friendship: FriendshipResponse


class DeclinedFriendshipData(CamelModel):
    declined_friendship_id: str


class FriendListData(CamelModel):
    users: list[UserResponse]
    total_pages: int = 1
    count: int


class FriendRequestsOverview(CamelModel):
    incoming: list[FriendshipResponse]
    outgoing: list[FriendshipResponse]


class IncomingRequestList(CamelModel):
    requests: list[IncomingRequestResponse]
    total_pages: int = 1
    count: int


class OutgoingRequestList(CamelModel):
    requests: list[OutgoingRequestResponse]
    total_pages: int = 1
    count: int


__all__ = [
    "FriendRequestPayload",
    "FriendshipResponse",
    "IncomingRequestResponse",
    "OutgoingRequestResponse",
    "FriendshipData",
    "DeclinedFriendshipData",
    "FriendListData",
    "FriendRequestsOverview",
    "IncomingRequestList",
    "OutgoingRequestList",
]
