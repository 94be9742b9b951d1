"""Reaction toggling keyed by (target type, target id, author)."""
from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from ..models import Record, TargetType, new_reaction
from ..store import JsonStore
from .enrichment import enrich_reaction


def _parse_target_type(value: str | None) -> TargetType | None:
    try:
        return TargetType(value)
    except ValueError:
        return None


def toggle_reaction(
    store: JsonStore,
    *,
    author: Record,
    target_type: str | None,
    target_id: str | None,
    emoji: str | None,
) -> dict[str, Any]:
    """Create, switch or remove the caller's reaction on a target.

    No reaction yet creates one. Sending the same emoji again removes it and
    returns the removed reaction with ``emoji`` set to ``None``. A different
    emoji updates the existing reaction in place, keeping its id.
    """

    kind = _parse_target_type(target_type)
    if kind is None or not target_id or not emoji:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid reaction request")

    author_id = author["_id"]
    with store.transaction():
        existing = store.find(
            "reactions",
            lambda r: r.get("targetType") == kind.value and r.get("targetId") == target_id and r.get("author") == author_id,
        )
        if existing is None:
            reaction = store.insert(
                "reactions",
                new_reaction(target_type=kind, target_id=target_id, author_id=author_id, emoji=emoji),
            )
        elif existing.get("emoji") == emoji:
            store.remove("reactions", existing["_id"])
            reaction = {**existing, "emoji": None}
        else:
            existing["emoji"] = emoji
            reaction = dict(existing)

    return enrich_reaction(store, reaction)


__all__ = ["toggle_reaction"]
