"""Tests for Mongo snapshot persistence."""

import pytest
from unittest.mock import AsyncMock

from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.repositories.snapshot_repo import SNAPSHOT_ID, SnapshotRepository


@pytest.mark.asyncio
async def test_save_replaces_single_document(mock_db, store, billed):
    store.shipments = [billed("a", 10)]
    repo = SnapshotRepository(mock_db)

    await repo.save(store)

    mock_db.snapshots.replace_one.assert_awaited_once()
    query, doc = mock_db.snapshots.replace_one.call_args[0]
    assert query == {"_id": SNAPSHOT_ID}
    assert doc["shipments"][0]["id"] == "a"
    assert "savedAt" in doc
    assert mock_db.snapshots.replace_one.call_args[1]["upsert"] is True


@pytest.mark.asyncio
async def test_load_empty(mock_db):
    assert await SnapshotRepository(mock_db).load() is None


@pytest.mark.asyncio
async def test_load_round_trip(mock_db, store, billed):
    store.shipments = [billed("a", 10)]
    doc = {"_id": SNAPSHOT_ID, "savedAt": "2024-01-01T00:00:00", **store.snapshot()}
    mock_db.snapshots.find_one = AsyncMock(return_value=doc)

    loaded = await SnapshotRepository(mock_db).load()

    assert isinstance(loaded, LedgerStore)
    assert loaded.snapshot() == store.snapshot()
