from fastapi import APIRouter, Depends
from indent_ledger.api.deps import get_reconciler, get_snapshot_repository, get_store
from indent_ledger.models.replication import ReplicationReport
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.repositories.snapshot_repo import SnapshotRepository
from indent_ledger.services.replication_service import ReplicationReconciler

router = APIRouter()

@router.post("/push", response_model=ReplicationReport)
async def push(reconciler: ReplicationReconciler = Depends(get_reconciler)):
    """Send the full local snapshot to the cloud store"""
    return await reconciler.push()

@router.post("/pull", response_model=ReplicationReport)
async def pull(
    reconciler: ReplicationReconciler = Depends(get_reconciler),
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Replace local collections with the cloud copy"""
    report = await reconciler.pull()
    await repo.save(store)
    return report
