"""In-memory tables backed by a single JSON document on disk."""
from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from fastapi import Request

from .models import Record

logger = logging.getLogger(__name__)

TABLES = ("users", "posts", "comments", "reactions", "friendships")

Predicate = Callable[[Record], bool]


class UnknownTableError(KeyError):
    """Raised when a caller names a table the store does not hold."""


class JsonStore:
    """Ordered record tables with id lookup and linear scans.

    Every table keeps insertion order, which doubles as the tie-break for the
    stable sorts used by feed listings. Mutations go through
    :meth:`transaction`, which serialises writers and persists on exit.
    """

    def __init__(
        self,
        data: dict[str, Any] | None = None,
        *,
        path: str | Path | None = None,
        persist: bool = True,
    ) -> None:
        source = data or {}
        self.tables: dict[str, list[Record]] = {name: list(source.get(name) or []) for name in TABLES}
        self.path = Path(path) if path is not None else None
        self.persist = persist and self.path is not None
        self._lock = threading.RLock()

    @classmethod
    def load(cls, path: str | Path, *, persist: bool = True) -> "JsonStore":
        """Read ``path`` into a new store; a missing file yields empty tables."""

        location = Path(path)
        try:
            with location.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            logger.warning("Data file %s not found, starting with empty tables", location)
            data = {}

        if not isinstance(data, dict):
            raise ValueError(f"{location} must contain a JSON object keyed by table name")

        store = cls(data, path=location, persist=persist)
        logger.info(
            "Data loaded from storage (%s)",
            ", ".join(f"{name}={len(rows)}" for name, rows in store.tables.items()),
        )
        return store

    def _table(self, table: str) -> list[Record]:
        try:
            return self.tables[table]
        except KeyError as exc:
            raise UnknownTableError(table) from exc

    def find_by_id(self, table: str, record_id: str | None) -> Record | None:
        if record_id is None:
            return None
        for record in self._table(table):
            if record.get("_id") == record_id:
                return record
        return None

    def find(self, table: str, predicate: Predicate) -> Record | None:
        for record in self._table(table):
            if predicate(record):
                return record
        return None

    def scan(self, table: str, predicate: Predicate | None = None) -> list[Record]:
        rows = self._table(table)
        if predicate is None:
            return list(rows)
        return [record for record in rows if predicate(record)]

    def count(self, table: str, predicate: Predicate | None = None) -> int:
        rows = self._table(table)
        if predicate is None:
            return len(rows)
        return sum(1 for record in rows if predicate(record))

    def insert(self, table: str, record: Record, *, prepend: bool = False) -> Record:
        rows = self._table(table)
        if prepend:
            rows.insert(0, record)
        else:
            rows.append(record)
        return record

    def remove(self, table: str, record_id: str) -> Record | None:
        rows = self._table(table)
        for index, record in enumerate(rows):
            if record.get("_id") == record_id:
                return rows.pop(index)
        return None

    def save(self) -> None:
        """Write every table back to disk; failures are logged, not raised."""

        if not self.persist or self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as fh:
                json.dump(self.tables, fh, ensure_ascii=False)
        except (OSError, TypeError, ValueError):
            logger.exception("Error saving data to storage at %s", self.path)

    @contextmanager
    def transaction(self) -> Iterator["JsonStore"]:
        """Hold the write lock for a mutate-then-save sequence."""

        with self._lock:
            yield self
            self.save()


def get_store(request: Request) -> JsonStore:
    """FastAPI dependency returning the store owned by the running app."""

    return request.app.state.store


__all__ = ["TABLES", "JsonStore", "UnknownTableError", "get_store"]
