"""Authentication routes issuing the session cookie."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..config import Settings, get_app_settings
from ..constants import ACCESS_TOKEN_COOKIE
from ..models import public_user
from ..schemas import ApiResponse, LoginRequest, RegisterRequest, UserData
from ..services import authenticate_user, create_access_token, register_user
from ..store import JsonStore, get_store

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _cookie_policy(settings: Settings) -> dict:
    # Cross-site HTTPS frontends need SameSite=None, which browsers only accept with Secure.
    if settings.is_production:
        return {"samesite": "none", "secure": True}
    return {"samesite": "lax", "secure": False}


def _set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        token,
        max_age=settings.jwt_expiration,
        path="/",
        httponly=True,
        **_cookie_policy(settings),
    )


def _clear_session_cookie(response: Response, settings: Settings) -> None:
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        "",
        max_age=0,
        path="/",
        httponly=True,
        **_cookie_policy(settings),
    )


@router.post("/login", response_model=ApiResponse[UserData])
async def login_endpoint(
    payload: LoginRequest,
    response: Response,
    store: JsonStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse[UserData]:
    user = authenticate_user(store, payload)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    _set_session_cookie(response, create_access_token(user["_id"], settings), settings)
    return ApiResponse[UserData](data=UserData(user=public_user(user)), message="Login successfully")


@router.post("/logout", response_model=ApiResponse[None])
async def logout_endpoint(
    response: Response,
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse[None]:
    _clear_session_cookie(response, settings)
    return ApiResponse[None](message="Logout successfully")


@router.post("/register", response_model=ApiResponse[UserData])
async def register_endpoint(
    payload: RegisterRequest,
    response: Response,
    store: JsonStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> ApiResponse[UserData]:
    user, token = register_user(store, payload, settings)
    _set_session_cookie(response, token, settings)
    return ApiResponse[UserData](data=UserData(user=public_user(user)), message="Register successfully")


__all__ = ["router"]
