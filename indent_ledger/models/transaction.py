from enum import Enum
from typing import Optional

from pydantic import Field

from indent_ledger.models.base import LedgerRecord, new_id, today


class TransactionType(str, Enum):
    CASH_IN = "Cash In"
    CASH_OUT = "Cash Out"
    SPECIAL = "Special"  # Special-account ledgers, outside the cash totals


class Transaction(LedgerRecord):
    """One cash-ledger entry. Independent of shipments unless linked by invoice_no."""

    id: str = Field(default_factory=new_id)
    date: str = Field(default_factory=today)
    type: TransactionType
    category: str = ""
    sub_account: Optional[str] = None
    description: str = ""
    amount: float = Field(gt=0)
    invoice_no: Optional[str] = None
    remarks: Optional[str] = None
    paid_month: Optional[str] = None  # Salary entries only
