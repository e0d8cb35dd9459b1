from typing import List, Optional

from pydantic import Field, computed_field

from indent_ledger.models.base import LedgerModel


class Allocation(LedgerModel):
    """Part of a lump payment applied to one shipment."""
    shipment_id: str
    invoice_no: str
    amount: float
    due_after: float


class AllocationShortfall(LedgerModel):
    """Cash left over after every outstanding shipment of the employee was settled."""
    employee_name: str
    unallocated: float


class AllocationResult(LedgerModel):
    employee_name: str
    requested: float
    allocations: List[Allocation] = Field(default_factory=list)
    shortfall: Optional[AllocationShortfall] = None

    @computed_field
    @property
    def allocated(self) -> float:
        return sum(a.amount for a in self.allocations)
