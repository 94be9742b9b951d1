"""Middleware adding a fixed artificial delay to every response."""
from __future__ import annotations

import asyncio

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp


class ResponseDelayMiddleware(BaseHTTPMiddleware):
    """Sleep for a configured delay before handing each request on."""

    def __init__(self, app: ASGIApp, *, delay_ms: int = 0) -> None:
        super().__init__(app)
        self._delay_seconds = max(delay_ms, 0) / 1000

    async def dispatch(self, request: Request, call_next) -> Response:
        if self._delay_seconds:
            await asyncio.sleep(self._delay_seconds)
        return await call_next(request)
