from typing import Optional

from indent_ledger.models.base import LedgerModel


class BillSubmitRequest(LedgerModel):
    shipment_id: str
    amount: float
    note: Optional[str] = None


class AllocationRequest(LedgerModel):
    employee_name: str
    amount: float


class AssociationPaymentRequest(LedgerModel):
    shipment_id: str
    amount: float
    remarks: Optional[str] = None
