"""Business logic for authentication against the JSON user table."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from ..config import Settings, get_app_settings
from ..constants import ACCESS_TOKEN_COOKIE
from ..models import Record, new_user
from ..schemas import LoginRequest, RegisterRequest
from ..store import JsonStore, get_store

logger = logging.getLogger(__name__)

_security = HTTPBearer(auto_error=False)
_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a plain-text password using bcrypt."""

    return _pwd_context.hash(password)


def verify_password(password: str, hashed_password: str | None) -> bool:
    """Verify that ``password`` matches ``hashed_password``."""

    if not hashed_password:
        return False
    try:
        return _pwd_context.verify(password, hashed_password)
    except ValueError:
        # Seed fixtures may still carry a plain-text password.
        return password == hashed_password


def create_access_token(subject: str, settings: Settings, *, expires_seconds: Optional[int] = None) -> str:
    """Create a signed JWT holding the user id under ``_id``."""

    now = datetime.now(timezone.utc)
    expire_delta = timedelta(seconds=expires_seconds or settings.jwt_expiration)
    payload = {"_id": subject, "iat": now, "exp": now + expire_delta}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> str:
    """Decode and validate a JWT, returning the embedded user id."""

    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized") from exc

    subject = payload.get("_id")
    if not subject:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return str(subject)


def register_user(store: JsonStore, payload: RegisterRequest, settings: Settings) -> Tuple[Record, str]:
    """Persist a new user and return it with an access token."""

    email = str(payload.email)
    with store.transaction():
        if store.find("users", lambda u: u.get("email") == email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot register with this email")
        user = store.insert(
            "users",
            new_user(email=email, password_hash=hash_password(payload.password), name=payload.name),
        )

    logger.info("Registered user %s", user["_id"])
    return user, create_access_token(user["_id"], settings)


def authenticate_user(store: JsonStore, payload: LoginRequest) -> Optional[Record]:
    """Return the user matching the credentials, or ``None``."""

    email = str(payload.email)
    user = store.find("users", lambda u: u.get("email") == email)
    if user is None or not verify_password(payload.password, user.get("password")):
        logger.warning("Failed login attempt for %s", email)
        return None
    return user


def _extract_token(request: Request, credentials: HTTPAuthorizationCredentials | None) -> str | None:
    cookie_token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if cookie_token:
        return cookie_token
    if credentials and credentials.scheme.lower() == "bearer":
        return credentials.credentials
    return None


async def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    settings: Settings = Depends(get_app_settings),
) -> str:
    """Resolve the caller id from the session cookie or a bearer token."""

    token = _extract_token(request, credentials)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return decode_access_token(token, settings)


async def get_current_user(
    user_id: str = Depends(get_current_user_id),
    store: JsonStore = Depends(get_store),
) -> Record:
    """Resolve the authenticated user record."""

    user = store.find_by_id("users", user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
    "register_user",
    "authenticate_user",
    "get_current_user_id",
    "get_current_user",
]
