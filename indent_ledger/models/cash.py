from enum import Enum
from typing import List, Optional

from pydantic import Field

from indent_ledger.models.base import LedgerModel
from indent_ledger.models.settlement import AllocationResult
from indent_ledger.models.transaction import Transaction


class PayeeKind(str, Enum):
    TRANSFER = "transfer"
    EMPLOYEE = "employee"
    EXTERNAL = "external"


class CashOutResult(LedgerModel):
    payee_kind: PayeeKind
    transactions: List[Transaction] = Field(default_factory=list)
    allocation: Optional[AllocationResult] = None


class CashTotals(LedgerModel):
    cash_in: float = 0
    cash_out: float = 0

    @property
    def net(self) -> float:
        return self.cash_in - self.cash_out
