from typing import Dict, List
from fastapi import APIRouter, Depends
from indent_ledger.api.deps import get_snapshot_repository, get_store
from indent_ledger.models.cash import CashOutResult
from indent_ledger.models.transaction import Transaction
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.repositories.snapshot_repo import SnapshotRepository
from indent_ledger.schemas.transaction import CashInRequest, CashOutRequest, CashTotalsResponse, SpecialEntryRequest
from indent_ledger.services.cash_ledger_service import CashLedger

router = APIRouter()

@router.get("/", response_model=List[Transaction])
async def list_transactions(
    search: str = "",
    store: LedgerStore = Depends(get_store)
):
    """Transactions, most recent first, filtered by description or sub-account"""
    needle = search.lower()
    return [
        t for t in store.transactions
        if needle in t.description.lower() or needle in (t.sub_account or "").lower()
    ]

@router.post("/cash-in", response_model=Transaction, status_code=201)
async def cash_in(
    cash_in_in: CashInRequest,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    transaction = CashLedger(store).post_cash_in(
        cash_in_in.sub_account,
        cash_in_in.amount,
        cash_in_in.description,
        cash_in_in.category,
        cash_in_in.invoice_no,
    )
    await repo.save(store)
    return transaction

@router.post("/cash-out", response_model=CashOutResult, status_code=201)
async def cash_out(
    cash_out_in: CashOutRequest,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Pay out of a sub-account; transfers and employee payments are linked"""
    result = CashLedger(store).post_cash_out(
        cash_out_in.source_sub_account,
        cash_out_in.payee,
        cash_out_in.amount,
        cash_out_in.remarks,
    )
    await repo.save(store)
    return result

@router.get("/totals", response_model=CashTotalsResponse)
async def totals(store: LedgerStore = Depends(get_store)):
    result = CashLedger(store).totals()
    return CashTotalsResponse(cash_in=result.cash_in, cash_out=result.cash_out, net=result.net)

@router.get("/balances", response_model=Dict[str, float])
async def sub_account_balances(store: LedgerStore = Depends(get_store)):
    return CashLedger(store).sub_account_balances()

@router.post("/special", response_model=Transaction, status_code=201)
async def post_special(
    entry_in: SpecialEntryRequest,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    """Book an entry on a special account"""
    transaction = CashLedger(store).post_special(
        entry_in.category,
        entry_in.amount,
        entry_in.sub_account,
        entry_in.description,
        entry_in.paid_month,
    )
    await repo.save(store)
    return transaction

@router.get("/special/totals", response_model=Dict[str, float])
async def special_account_totals(store: LedgerStore = Depends(get_store)):
    return CashLedger(store).special_account_totals()

@router.delete("/{transaction_id}")
async def delete_transaction(
    transaction_id: str,
    store: LedgerStore = Depends(get_store),
    repo: SnapshotRepository = Depends(get_snapshot_repository)
):
    CashLedger(store).delete_transaction(transaction_id)
    await repo.save(store)
    return {"message": "Transaction deleted successfully"}
