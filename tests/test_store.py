"""JSON store loading, lookups and persistence."""
from __future__ import annotations

import json

import pytest

from codercomm.store import TABLES, JsonStore, UnknownTableError


def test_missing_file_starts_empty(tmp_path):
    store = JsonStore.load(tmp_path / "absent.json")
    assert all(store.scan(table) == [] for table in TABLES)


def test_missing_tables_default_to_empty(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"users": [{"_id": "u1", "name": "Una"}]}), encoding="utf-8")

    store = JsonStore.load(path)
    assert store.find_by_id("users", "u1")["name"] == "Una"
    assert store.scan("reactions") == []


def test_transaction_persists_changes(tmp_path):
    path = tmp_path / "data.json"
    store = JsonStore(path=path)
    with store.transaction():
        store.insert("posts", {"_id": "p1", "content": "hi"})

    reloaded = JsonStore.load(path)
    assert reloaded.find_by_id("posts", "p1") == {"_id": "p1", "content": "hi"}


def test_failed_transaction_does_not_save(tmp_path):
    path = tmp_path / "data.json"
    store = JsonStore(path=path)
    with pytest.raises(RuntimeError):
        with store.transaction():
            store.insert("posts", {"_id": "p1"})
            raise RuntimeError("boom")
    assert not path.exists()


def test_persist_disabled_never_writes(tmp_path):
    path = tmp_path / "data.json"
    store = JsonStore(path=path, persist=False)
    with store.transaction():
        store.insert("users", {"_id": "u1"})
    assert not path.exists()


def test_remove_keeps_insertion_order():
    store = JsonStore({"reactions": [{"_id": "a"}, {"_id": "b"}, {"_id": "c"}]})
    removed = store.remove("reactions", "b")
    assert removed == {"_id": "b"}
    assert [r["_id"] for r in store.scan("reactions")] == ["a", "c"]
    assert store.remove("reactions", "missing") is None


def test_prepend_and_scan_predicate():
    store = JsonStore()
    store.insert("posts", {"_id": "old", "author": "u1"})
    store.insert("posts", {"_id": "new", "author": "u2"}, prepend=True)
    assert [p["_id"] for p in store.scan("posts")] == ["new", "old"]
    assert store.scan("posts", lambda p: p["author"] == "u1") == [{"_id": "old", "author": "u1"}]
    assert store.count("posts") == 2


def test_unknown_table():
    with pytest.raises(UnknownTableError):
        JsonStore().scan("groups")
