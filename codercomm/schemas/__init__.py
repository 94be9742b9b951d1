"""Convenience exports for schema layer."""
from .auth import LoginRequest, RegisterRequest
from .common import ApiResponse, CamelModel, ErrorResponse
from .friends import (
    DeclinedFriendshipData,
    FriendListData,
    FriendRequestPayload,
    FriendRequestsOverview,
    FriendshipData,
    FriendshipResponse,
    IncomingRequestList,
    IncomingRequestResponse,
    OutgoingRequestList,
    OutgoingRequestResponse,
)
from .posts import (
    CommentCreate,
    CommentData,
    CommentListData,
    CommentResponse,
    PostCreate,
    PostData,
    PostFeedData,
    PostResponse,
    ReactionResponse,
)
from .reactions import ReactionData, ReactionRequest
from .users import (
    AuthorSummary,
    UserData,
    UserDetailData,
    UserDetailResponse,
    UserListData,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ApiResponse",
    "CamelModel",
    "ErrorResponse",
    "LoginRequest",
    "RegisterRequest",
    "AuthorSummary",
    "UserResponse",
    "UserDetailResponse",
    "UserUpdateRequest",
    "UserData",
    "UserDetailData",
    "UserListData",
    "PostCreate",
    "PostResponse",
    "PostData",
    "PostFeedData",
    "CommentCreate",
    "CommentResponse",
    "CommentData",
    "CommentListData",
    "ReactionResponse",
    "ReactionRequest",
    "ReactionData",
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
