"""
SnapshotRepository - local persistence of the ledger store.

The whole store is kept as one document so a save is all-or-nothing.
"""

from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from indent_ledger.repositories.ledger_store import LedgerStore

SNAPSHOT_ID = "ledger"


class SnapshotRepository:
    """Snapshot database operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["snapshots"]

    async def load(self) -> Optional[LedgerStore]:
        """Load the persisted store, or None when nothing has been saved yet."""
        doc = await self.collection.find_one({"_id": SNAPSHOT_ID})
        if not doc:
            return None
        doc.pop("_id", None)
        doc.pop("savedAt", None)
        return LedgerStore.model_validate(doc)

    async def save(self, store: LedgerStore) -> None:
        doc = store.snapshot()
        doc["savedAt"] = datetime.now(timezone.utc)
        await self.collection.replace_one({"_id": SNAPSHOT_ID}, doc, upsert=True)
