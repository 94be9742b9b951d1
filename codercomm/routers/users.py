"""User profile and directory routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..constants import USERS_PAGE_LIMIT
from ..models import Record, public_user
from ..schemas import ApiResponse, UserData, UserDetailData, UserListData, UserUpdateRequest
from ..services import get_current_user, get_current_user_id, get_profile, list_users, update_profile
from ..store import JsonStore, get_store

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me", response_model=ApiResponse[UserData])
async def me_endpoint(current_user: Record = Depends(get_current_user)) -> ApiResponse[UserData]:
    return ApiResponse[UserData](data=UserData(user=public_user(current_user)), message="Current user fetched successfully")


@router.put("/me", response_model=ApiResponse[UserData])
async def update_me_endpoint(
    payload: UserUpdateRequest,
    current_user: Record = Depends(get_current_user),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[UserData]:
    user = update_profile(store, user_id=current_user["_id"], payload=payload)
    return ApiResponse[UserData](data=UserData(user=user), message="Update profile successfully")


@router.get("", response_model=ApiResponse[UserListData])
async def list_users_endpoint(
    page: int = Query(0, ge=0),
    limit: int = Query(USERS_PAGE_LIMIT, ge=1),
    current_user: Record = Depends(get_current_user),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[UserListData]:
    result = list_users(store, viewer_id=current_user["_id"], page=page, limit=limit)
    return ApiResponse[UserListData](
        data=UserListData(
            users=result.items,
            total_pages=result.total_pages,
            count=result.count,
            page=result.page,
            limit=result.limit,
        ),
        message="Users fetched successfully",
    )


@router.get("/{user_id}", response_model=ApiResponse[UserDetailData], dependencies=[Depends(get_current_user_id)])
async def get_user_endpoint(
    user_id: str,
    store: JsonStore = Depends(get_store),
) -> ApiResponse[UserDetailData]:
    return ApiResponse[UserDetailData](
        data=UserDetailData(user=get_profile(store, user_id)),
        message="User fetched successfully",
    )


@router.put("/{user_id}", response_model=ApiResponse[UserData])
async def update_user_endpoint(
    user_id: str,
    payload: UserUpdateRequest,
    current_user: Record = Depends(get_current_user),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[UserData]:
    if current_user["_id"] != user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You are not authorized to update this user")
    user = update_profile(store, user_id=user_id, payload=payload)
    return ApiResponse[UserData](data=UserData(user=user), message="Update profile successfully")


__all__ = ["router"]
