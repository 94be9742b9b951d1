"""Cursor and offset pagination over ordered candidate sequences."""
from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _record_id(item: Any) -> Any:
    return item.get("_id")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a candidate sequence plus the cursor for the next slice."""

    items: list[T] = field(default_factory=list)
    next_cursor: str | None = None
    has_more: bool = False


def locate_start(candidates: Sequence[Any], cursor: str | None, *, key: Callable[[Any], Any] = _record_id) -> int:
    """Index of the first item after ``cursor``.

    A cursor that does not match any candidate (deleted item, stale or
    forged value) restarts from the beginning instead of failing.
    """

    if not cursor:
        return 0
    for index, item in enumerate(candidates):
        if key(item) == cursor:
            return index + 1
    return 0


def paginate(
    candidates: Sequence[T],
    *,
    cursor: str | None = None,
    limit: int,
    key: Callable[[T], Any] = _record_id,
) -> Page[T]:
    """Return the page following ``cursor``.

    Stateless: the same candidates and cursor always produce the same page.
    ``limit`` is expected to be a positive integer validated upstream.
    """

    start = locate_start(candidates, cursor, key=key)
    end = start + limit
    items = list(candidates[start:end])
    has_more = len(candidates) - end > 0
    next_cursor = key(items[-1]) if has_more and items else None
    return Page(items=items, next_cursor=next_cursor, has_more=has_more)


@dataclass(frozen=True)
class OffsetPage(Generic[T]):
    items: list[T]
    count: int
    total_pages: int
    page: int
    limit: int


def paginate_offset(candidates: Sequence[T], *, page: int, limit: int) -> OffsetPage[T]:
    """Zero-based page slicing used by the user directory."""

    start = page * limit
    total = len(candidates)
    return OffsetPage(
        items=list(candidates[start : start + limit]),
        count=total,
        total_pages=math.ceil(total / limit) if limit else 0,
        page=page,
        limit=limit,
    )


__all__ = ["Page", "OffsetPage", "locate_start", "paginate", "paginate_offset"]
