"""Project-wide constant values."""
from __future__ import annotations

ACCESS_TOKEN_COOKIE = "codercomm-access-token"

FEED_PAGE_LIMIT = 5
COMMENTS_PAGE_LIMIT = 5
USERS_PAGE_LIMIT = 10

__all__ = ["ACCESS_TOKEN_COOKIE", "FEED_PAGE_LIMIT", "COMMENTS_PAGE_LIMIT", "USERS_PAGE_LIMIT"]
