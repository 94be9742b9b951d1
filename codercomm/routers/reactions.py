"""Reaction toggle route."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..models import Record
from ..schemas import ApiResponse, ReactionData, ReactionRequest
from ..services import get_current_user, toggle_reaction
from ..store import JsonStore, get_store

router = APIRouter(prefix="/api/reactions", tags=["reactions"])


@router.post("", response_model=ApiResponse[ReactionData])
async def toggle_reaction_endpoint(
    payload: ReactionRequest,
    current_user: Record = Depends(get_current_user),
    store: JsonStore = Depends(get_store),
) -> ApiResponse[ReactionData]:
    reaction = toggle_reaction(
        store,
        author=current_user,
        target_type=payload.target_type,
        target_id=payload.target_id,
        emoji=payload.emoji,
    )
    return ApiResponse[ReactionData](data=ReactionData(reaction=reaction))


__all__ = ["router"]
