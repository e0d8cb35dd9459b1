from typing import List, Optional
from fastapi import APIRouter, Depends
from indent_ledger.api.deps import get_snapshot_repository, get_store
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.repositories.snapshot_repo import SnapshotRepository
from indent_ledger.schemas.shipment import (
    IndentBreakdownResponse,
    ShipmentCreate,
    ShipmentResponse,
    ShipmentUpdate,
)
from indent_ledger.services.shipment_service import ShipmentService

router = APIRouter()

@router.get("/", response_model=List[ShipmentResponse])
async def list_shipments(
    employee: Optional[str] = None,
    store: LedgerStore = Depends(get_store)
):
    """List shipments, optionally for one employee, in collection order"""
    return [ShipmentResponse.from_shipment(s) for s in ShipmentService(store).list_all(employee)]

@router.post("/", response_model=ShipmentResponse, status_code=201)
async def create_shipment(
    shipment_in: ShipmentCreate,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Post a new shipment and compute its indent"""
    shipment = ShipmentService(store).create(shipment_in.model_dump(exclude_none=True))
    await repo.save(store)
    return ShipmentResponse.from_shipment(shipment)

@router.post("/preview", response_model=IndentBreakdownResponse)
async def preview_indent(
    shipment_in: ShipmentCreate,
    store: LedgerStore = Depends(get_store)
):
    """Compute the indent for unsaved quantities"""
    breakdown = ShipmentService(store).preview(shipment_in.model_dump(exclude_none=True))
    return IndentBreakdownResponse.from_breakdown(breakdown)

@router.get("/pending", response_model=List[ShipmentResponse])
async def list_pending(
    search: str = "",
    store: LedgerStore = Depends(get_store)
):
    """Shipments with an outstanding due"""
    return [ShipmentResponse.from_shipment(s) for s in ShipmentService(store).pending(search)]

@router.get("/paid", response_model=List[ShipmentResponse])
async def list_paid(store: LedgerStore = Depends(get_store)):
    """Shipments with any payment recorded"""
    return [ShipmentResponse.from_shipment(s) for s in ShipmentService(store).paid()]

@router.get("/{shipment_id}", response_model=ShipmentResponse)
async def get_shipment(
    shipment_id: str,
    store: LedgerStore = Depends(get_store)
):
    return ShipmentResponse.from_shipment(store.get_shipment(shipment_id))

@router.get("/{shipment_id}/indent", response_model=IndentBreakdownResponse)
async def get_indent_breakdown(
    shipment_id: str,
    store: LedgerStore = Depends(get_store)
):
    """Rates and components behind a shipment's total"""
    return IndentBreakdownResponse.from_breakdown(ShipmentService(store).breakdown(shipment_id))

@router.patch("/{shipment_id}", response_model=ShipmentResponse)
async def update_shipment(
    shipment_id: str,
    shipment_in: ShipmentUpdate,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Edit a shipment; the indent is recomputed when rate inputs change"""
    shipment = ShipmentService(store).update(shipment_id, shipment_in.model_dump(exclude_unset=True))
    await repo.save(store)
    return ShipmentResponse.from_shipment(shipment)

@router.delete("/{shipment_id}")
async def delete_shipment(
    shipment_id: str,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Remove a shipment permanently"""
    ShipmentService(store).delete(shipment_id)
    await repo.save(store)
    return {"message": "Shipment deleted successfully"}
