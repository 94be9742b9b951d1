"""Convenience exports for service layer."""
from .auth_service import (
    authenticate_user,
    create_access_token,
    decode_access_token,
    get_current_user,
    get_current_user_id,
    register_user,
)
from .enrichment import enrich_author, enrich_comment, enrich_friendship, enrich_post, enrich_reactions
from .feed_service import FeedSelector, HomeFeed, PostComments, UserPosts, list_page
from .friendship_service import (
    cancel_friend_request,
    list_friend_requests,
    list_friends,
    list_incoming_requests,
    list_outgoing_requests,
    remove_friend,
    respond_to_request,
    send_friend_request,
)
from .pagination import OffsetPage, Page, paginate, paginate_offset
from .post_service import (
    create_post_comment,
    create_post_record,
    list_home_feed,
    list_post_comments,
    list_user_posts,
)
from .profile_service import get_profile, list_users, update_profile
from .reaction_service import toggle_reaction

__all__ = [
    "authenticate_user",
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "get_current_user_id",
    "register_user",
    "enrich_author",
    "enrich_comment",
    "enrich_friendship",
    "enrich_post",
    "enrich_reactions",
    "FeedSelector",
    "HomeFeed",
    "PostComments",
    "UserPosts",
    "list_page",
    "cancel_friend_request",
    "list_friend_requests",
    "list_friends",
    "list_incoming_requests",
    "list_outgoing_requests",
    "remove_friend",
    "respond_to_request",
    "send_friend_request",
    "OffsetPage",
    "Page",
    "paginate",
    "paginate_offset",
    "create_post_comment",
    "create_post_record",
    "list_home_feed",
    "list_post_comments",
    "list_user_posts",
    "get_profile",
    "list_users",
    "update_profile",
    "toggle_reaction",
]
