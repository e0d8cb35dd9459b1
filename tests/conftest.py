import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from indent_ledger.main import app
from indent_ledger.api.deps import get_reconciler, get_snapshot_repository, get_store
from indent_ledger.models.employee import Employee
from indent_ledger.models.reference import ReferenceLists
from indent_ledger.models.shipment import Shipment
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.repositories.snapshot_repo import SnapshotRepository
from indent_ledger.services.replication_service import ReplicationReconciler

CLOUD_URL = "https://cloud.example.test/exec"


@pytest.fixture
def store() -> LedgerStore:
    """Empty ledger with two sub-accounts and two employees."""
    return LedgerStore(
        employees=[Employee(name="Rahim"), Employee(name="Karim")],
        lists=ReferenceLists(sub_accounts=["Main", "Rent"], staff=["Samim"]),
    )


@pytest.fixture
def shipment_record() -> dict:
    """Shipment as the entry form sends it."""
    return {
        "employeeName": "Rahim",
        "invoiceNo": "INV-001",
        "buyer": "H&M",
        "shipper": "GENERIC",
        "depot": "OCL",
        "docQty": 10,
        "ctnQty": 5,
        "tonQty": 2,
        "unloadQty": 3,
        "conQty": 1,
        "otherAmt": 100,
    }


@pytest.fixture
def billed():
    """Factory for shipments with a fixed total, for settlement tests."""
    def make(shipment_id: str, total: float, employee: str = "Rahim", paid: float = 0, invoice: str = "") -> Shipment:
        return Shipment(
            id=shipment_id,
            employee_name=employee,
            invoice_no=invoice or f"INV-{shipment_id}",
            total_indent=total,
            paid=paid,
        )
    return make


@pytest.fixture
def mock_db():
    """Motor database stand-in; every collection shares one mock."""
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.replace_one = AsyncMock()
    db = MagicMock()
    db.__getitem__.return_value = collection
    db.snapshots = collection
    return db


@pytest.fixture
def reconciler(store) -> ReplicationReconciler:
    return ReplicationReconciler(store, url=CLOUD_URL, timeout=5)


@pytest.fixture
def test_client(store, mock_db, reconciler):
    """API client bound to the test store; startup (Mongo) is not run."""
    repo = SnapshotRepository(mock_db)
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_snapshot_repository] = lambda: repo
    app.dependency_overrides[get_reconciler] = lambda: reconciler

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
