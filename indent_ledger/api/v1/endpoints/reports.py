from typing import List
from fastapi import APIRouter, Depends
from indent_ledger.api.deps import get_store
from indent_ledger.models.report import AccountsSummary, AssociationSummary, EmployeeAccount
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.services.cash_ledger_service import CashLedger
from indent_ledger.services.shipment_service import ShipmentService

router = APIRouter()

@router.get("/employees", response_model=List[EmployeeAccount])
async def employee_accounts(store: LedgerStore = Depends(get_store)):
    """Indent, paid and due per employee, largest due first"""
    return ShipmentService(store).employee_accounts()

@router.get("/association", response_model=AssociationSummary)
async def association_summary(store: LedgerStore = Depends(get_store)):
    """Estimated association fees against what has been paid"""
    return ShipmentService(store).association_summary()

@router.get("/accounts", response_model=AccountsSummary)
async def accounts_summary(store: LedgerStore = Depends(get_store)):
    """Total billed against total collected across shipments and cash"""
    return CashLedger(store).accounts_summary()
