"""Middleware exports."""
from __future__ import annotations

from .latency import ResponseDelayMiddleware

__all__ = ["ResponseDelayMiddleware"]
