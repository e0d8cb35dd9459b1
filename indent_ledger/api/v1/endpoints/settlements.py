from typing import List
from fastapi import APIRouter, Depends
from indent_ledger.api.deps import get_snapshot_repository, get_store
from indent_ledger.models.settlement import AllocationResult
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.repositories.snapshot_repo import SnapshotRepository
from indent_ledger.schemas.settlement import AllocationRequest, AssociationPaymentRequest, BillSubmitRequest
from indent_ledger.schemas.shipment import ShipmentResponse
from indent_ledger.services.settlement_service import SettlementLedger

router = APIRouter()

@router.post("/bills", response_model=ShipmentResponse)
async def submit_bill(
    bill_in: BillSubmitRequest,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Record a collection against one shipment, up to its due"""
    shipment = SettlementLedger(store).submit_bill(bill_in.shipment_id, bill_in.amount, bill_in.note)
    await repo.save(store)
    return ShipmentResponse.from_shipment(shipment)

@router.post("/{shipment_id}/quick-settle", response_model=ShipmentResponse)
async def quick_settle(
    shipment_id: str,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Mark a shipment fully paid"""
    shipment = SettlementLedger(store).quick_settle(shipment_id)
    await repo.save(store)
    return ShipmentResponse.from_shipment(shipment)

@router.post("/allocations", response_model=AllocationResult)
async def allocate(
    allocation_in: AllocationRequest,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Spread a payment over an employee's outstanding shipments"""
    result = SettlementLedger(store).allocate_fifo(allocation_in.employee_name, allocation_in.amount)
    await repo.save(store)
    return result

@router.post("/association", response_model=ShipmentResponse)
async def pay_association_fee(
    payment_in: AssociationPaymentRequest,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Record an association fee payment"""
    shipment = SettlementLedger(store).pay_association_fee(
        payment_in.shipment_id, payment_in.amount, payment_in.remarks
    )
    await repo.save(store)
    return ShipmentResponse.from_shipment(shipment)

@router.get("/submitted-invoices", response_model=List[str])
async def submitted_invoices(store: LedgerStore = Depends(get_store)):
    return store.submitted_invoices
