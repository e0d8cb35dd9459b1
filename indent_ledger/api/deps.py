from fastapi import Request

from indent_ledger.db.session import get_database
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.repositories.snapshot_repo import SnapshotRepository
from indent_ledger.services.replication_service import ReplicationReconciler


def get_store(request: Request) -> LedgerStore:
    """The in-memory store loaded at startup."""
    return request.app.state.store


async def get_snapshot_repository() -> SnapshotRepository:
    return SnapshotRepository(await get_database())


def get_reconciler(request: Request) -> ReplicationReconciler:
    return request.app.state.reconciler
