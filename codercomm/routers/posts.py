"""Post, feed and comment routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ..constants import COMMENTS_PAGE_LIMIT, FEED_PAGE_LIMIT
from ..models import Record
from ..schemas import (
    ApiResponse,
    CommentCreate,
    CommentData,
    CommentListData,
    PostCreate,
    PostData,
    PostFeedData,
)
from ..services import (
    create_post_comment,
    create_post_record,
    get_current_user,
    get_current_user_id,
    list_home_feed,
    list_post_comments,
    list_user_posts,
)
from ..services.pagination import Page
from ..store import JsonStore, get_store

router = APIRouter(prefix="/api/posts", tags=["posts"])


def _feed_data(page: Page) -> PostFeedData:
    return PostFeedData(posts=page.items, next_cursor=page.next_cursor, has_more=page.has_more)


@router.get("", response_model=ApiResponse[PostFeedData])
async def feed_endpoint(
    cursor: str | None = Query(None),
    limit: int = Query(FEED_PAGE_LIMIT, ge=1),
    viewer_id: str = Depends(get_current_user_id),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[PostFeedData]:
    page = list_home_feed(store, viewer_id=viewer_id, cursor=cursor, limit=limit)
    return ApiResponse[PostFeedData](data=_feed_data(page), message="Posts fetched successfully")


@router.post("", response_model=ApiResponse[PostData])
async def create_post_endpoint(
    payload: PostCreate,
    current_user: Record = Depends(get_current_user),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[PostData]:
    post = create_post_record(store, author=current_user, content=payload.content, image=payload.image)
    return ApiResponse[PostData](data=PostData(post=post), message="Post created successfully")


@router.get("/user/{user_id}", response_model=ApiResponse[PostFeedData], dependencies=[Depends(get_current_user_id)])
async def posts_by_user_endpoint(
    user_id: str,
    cursor: str | None = Query(None),
    limit: int = Query(FEED_PAGE_LIMIT, ge=1),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[PostFeedData]:
    page = list_user_posts(store, user_id=user_id, cursor=cursor, limit=limit)
    return ApiResponse[PostFeedData](data=_feed_data(page), message="Posts fetched for user successfully")


@router.get(
    "/{post_id}/comments",
    response_model=ApiResponse[CommentListData],
    dependencies=[Depends(get_current_user_id)],
)
async def list_comments_endpoint(
    post_id: str,
    cursor: str | None = Query(None),
    limit: int = Query(COMMENTS_PAGE_LIMIT, ge=1),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[CommentListData]:
    page = list_post_comments(store, post_id=post_id, cursor=cursor, limit=limit)
    return ApiResponse[CommentListData](
        data=CommentListData(comments=page.items, next_cursor=page.next_cursor, has_more=page.has_more),
    )


@router.post("/{post_id}/comments", response_model=ApiResponse[CommentData])
async def create_comment_endpoint(
    post_id: str,
    payload: CommentCreate,
    current_user: Record = Depends(get_current_user),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[CommentData]:
    comment = create_post_comment(store, post_id=post_id, author=current_user, content=payload.content)
    return ApiResponse[CommentData](data=CommentData(comment=comment), message="Comment added successfully")


__all__ = ["router"]
