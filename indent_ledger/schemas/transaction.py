from typing import Optional

from indent_ledger.models.base import LedgerModel


class CashInRequest(LedgerModel):
    sub_account: str
    amount: float
    description: str = ""
    category: str = ""
    invoice_no: Optional[str] = None


class CashOutRequest(LedgerModel):
    source_sub_account: str
    payee: str
    amount: float
    remarks: str = ""


class CashTotalsResponse(LedgerModel):
    cash_in: float
    cash_out: float
    net: float


class SpecialEntryRequest(LedgerModel):
    category: str
    amount: float
    sub_account: Optional[str] = None
    description: str = ""
    paid_month: Optional[str] = None
