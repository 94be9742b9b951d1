"""Friend management API routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from ..schemas import (
    ApiResponse,
    DeclinedFriendshipData,
    FriendListData,
    FriendRequestPayload,
    FriendRequestsOverview,
    FriendshipData,
    IncomingRequestList,
    OutgoingRequestList,
)
from ..services import (
    cancel_friend_request,
    get_current_user_id,
    list_friend_requests,
    list_friends,
    list_incoming_requests,
    list_outgoing_requests,
    remove_friend,
    respond_to_request,
    send_friend_request,
)
from ..store import JsonStore, get_store

router = APIRouter(prefix="/api/friends", tags=["friends"])


@router.get("", response_model=ApiResponse[FriendListData])
async def list_friends_endpoint(
    name: str = Query(""),
    user_id: str = Depends(get_current_user_id),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[FriendListData]:
    friends = list_friends(store, user_id=user_id, name=name)
    return ApiResponse[FriendListData](data=FriendListData(users=friends, total_pages=1, count=len(friends)))


@router.get("/requests", response_model=ApiResponse[FriendRequestsOverview])
async def friend_requests_overview(
    user_id: str = Depends(get_current_user_id),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[FriendRequestsOverview]:
    incoming, outgoing = list_friend_requests(store, user_id=user_id)
    return ApiResponse[FriendRequestsOverview](data=FriendRequestsOverview(incoming=incoming, outgoing=outgoing))


@router.get("/requests/incoming", response_model=ApiResponse[IncomingRequestList])
async def incoming_requests_endpoint(
    name: str = Query(""),
    user_id: str = Depends(get_current_user_id),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[IncomingRequestList]:
    requests = list_incoming_requests(store, user_id=user_id, name=name)
    return ApiResponse[IncomingRequestList](
        data=IncomingRequestList(requests=requests, total_pages=1, count=len(requests)),
    )


@router.get("/requests/outgoing", response_model=ApiResponse[OutgoingRequestList])
async def outgoing_requests_endpoint(
    name: str = Query(""),
    user_id: str = Depends(get_current_user_id),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[OutgoingRequestList]:
    requests = list_outgoing_requests(store, user_id=user_id, name=name)
    return ApiResponse[OutgoingRequestList](
        data=OutgoingRequestList(requests=requests, total_pages=1, count=len(requests)),
    )


@router.post("/requests", response_model=ApiResponse[FriendshipData])
async def send_friend_request_endpoint(
    payload: FriendRequestPayload,
    user_id: str = Depends(get_current_user_id),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[FriendshipData]:
    friendship = send_friend_request(store, sender_id=user_id, recipient_id=payload.to)
    return ApiResponse[FriendshipData](
        data=FriendshipData(friendship=friendship),
        message="Friend request sent successfully",
    )


@router.put(
    "/requests/{requester_id}",
    response_model=ApiResponse[FriendshipData] | ApiResponse[DeclinedFriendshipData],
)
async def respond_to_request_endpoint(
    requester_id: str,
    action: str | None = Query(None),
    user_id: str = Depends(get_current_user_id),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[FriendshipData] | ApiResponse[DeclinedFriendshipData]:
    result = respond_to_request(store, requester_id=requester_id, recipient_id=user_id, action=action)
    if "declinedFriendshipId" in result:
        return ApiResponse[DeclinedFriendshipData](
            data=DeclinedFriendshipData(declined_friendship_id=result["declinedFriendshipId"]),
            message="Friend request declined",
        )
    return ApiResponse[FriendshipData](
        data=FriendshipData(friendship=result),
        message="Friend request accepted",
    )


@router.delete("/requests/{recipient_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def cancel_friend_request_endpoint(
    recipient_id: str,
    user_id: str = Depends(get_current_user_id),
    store: JsonStore = Depends(get_store),
) -> Response:
    cancel_friend_request(store, sender_id=user_id, recipient_id=recipient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{friend_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def remove_friend_endpoint(
    friend_id: str,
    user_id: str = Depends(get_current_user_id),
    store: JsonStore = Depends(get_store),
) -> Response:
    remove_friend(store, user_id=user_id, friend_id=friend_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
