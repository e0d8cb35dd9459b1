from indent_ledger.models.base import LedgerModel


class EmployeeAccount(LedgerModel):
    name: str
    total_indent: float = 0
    paid: float = 0
    due: float = 0
    count: int = 0


class AssociationSummary(LedgerModel):
    qty: float = 0
    amount: float = 0
    paid: float = 0
    due: float = 0


class AccountsSummary(LedgerModel):
    total_billed: float = 0
    total_collection: float = 0
    cash_out: float = 0
    outstanding: float = 0
