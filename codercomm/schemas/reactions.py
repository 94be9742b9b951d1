"""Schemas for the reaction toggle endpoint."""
from __future__ import annotations

from .common import CamelModel
from .posts import ReactionResponse


class ReactionRequest(CamelModel):
    """Loosely typed so invalid combinations surface as a 400, not a 422."""

    target_type: str | None = None
    target_id: str | None = None
    emoji: str | None = None


class ReactionData(CamelModel):
    reaction: ReactionResponse


__all__ = ["ReactionRequest", "ReactionData"]
