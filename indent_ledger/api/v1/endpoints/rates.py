from typing import List
from fastapi import APIRouter, Depends, HTTPException
from indent_ledger.api.deps import get_snapshot_repository, get_store
from indent_ledger.models.price_rule import PriceRule
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.repositories.snapshot_repo import SnapshotRepository
from indent_ledger.schemas.rate import PriceRuleCreate
from indent_ledger.schemas.shipment import RatesResponse
from indent_ledger.services.rate_table import resolve_rates
from indent_ledger.services.shipment_service import ShipmentService

router = APIRouter()

@router.get("/resolve", response_model=RatesResponse)
async def resolve(
    buyer: str = "",
    shipper: str = "",
    depot: str = "",
    store: LedgerStore = Depends(get_store)
):
    """Rates that would apply to a buyer/shipper/depot combination"""
    return RatesResponse(**vars(resolve_rates(buyer, shipper, depot, store.prices)))

@router.get("/prices", response_model=List[PriceRule])
async def list_price_rules(store: LedgerStore = Depends(get_store)):
    return store.prices

@router.post("/prices", response_model=PriceRule, status_code=201)
async def add_price_rule(
    rule_in: PriceRuleCreate,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Add an operator rule and re-derive every shipment total"""
    rule = PriceRule(**rule_in.model_dump())
    store.prices.append(rule)
    ShipmentService(store).recompute_all()
    await repo.save(store)
    return rule

@router.delete("/prices/{rule_id}")
async def delete_price_rule(
    rule_id: str,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    if store.get_price_rule(rule_id) is None:
        raise HTTPException(status_code=404, detail="Price rule not found")
    store.prices = [r for r in store.prices if r.id != rule_id]
    ShipmentService(store).recompute_all()
    await repo.save(store)
    return {"message": "Price rule deleted successfully"}
