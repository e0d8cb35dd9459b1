"""
Shipment model - one billable indent.

Design principles:
- total_indent is derived from the shipment's own quantities and
  classification, never from payment history
- paid only moves up under settlement operations
- association_paid/association_remarks are a separate ledger on the same id
- Status: unpaid -> partially_paid -> settled
"""

from enum import Enum

from pydantic import Field, field_validator

from indent_ledger.models.base import LedgerRecord, coerce_number, new_id, today

ASSOCIATION_FEE_RATE = 85
SETTLED_TOLERANCE = 0.01

# Fields whose change requires a full total_indent recompute
INDENT_FIELDS = frozenset({
    "doc_qty", "ctn_qty", "ton_qty", "unload_qty", "con_qty", "other_amt",
    "buyer", "shipper", "depot",
})


class SettlementState(str, Enum):
    UNPAID = "unpaid"
    PARTIALLY_PAID = "partially_paid"
    SETTLED = "settled"


class Shipment(LedgerRecord):
    id: str = Field(default_factory=new_id)
    date: str = Field(default_factory=today)
    employee_name: str = ""
    job_no: str = ""
    invoice_no: str = ""  # Not unique: one invoice can span several shippers
    exporter_name: str = ""

    # Classification (matched case-insensitively by the rate table)
    shipper: str = ""
    buyer: str = ""
    depot: str = ""

    # Quantities
    doc_qty: float = 0
    ctn_qty: float = 0
    ton_qty: float = 0
    unload_qty: float = 0
    con_qty: float = 0
    other_amt: float = 0

    # Derived
    total_indent: float = 0

    # Settlement
    paid: float = 0
    remarks: str = ""

    # Association sub-ledger
    association_paid: float = 0
    association_remarks: str = ""

    cost: float = 0
    profit: float = 0

    @field_validator(
        "doc_qty", "ctn_qty", "ton_qty", "unload_qty", "con_qty", "other_amt",
        "total_indent", "paid", "association_paid", "cost", "profit",
        mode="before",
    )
    @classmethod
    def _blank_is_zero(cls, value):
        return coerce_number(value)

    @field_validator(
        "employee_name", "job_no", "invoice_no", "exporter_name", "shipper",
        "buyer", "depot", "remarks", "association_remarks",
        mode="before",
    )
    @classmethod
    def _none_is_empty(cls, value):
        return "" if value is None else value

    @property
    def due(self) -> float:
        """Outstanding balance."""
        return self.total_indent - self.paid

    @property
    def association_fee_estimate(self) -> float:
        return self.doc_qty * ASSOCIATION_FEE_RATE

    @property
    def association_due(self) -> float:
        return self.association_fee_estimate - self.association_paid

    @property
    def settlement_state(self) -> SettlementState:
        if self.due <= SETTLED_TOLERANCE:
            return SettlementState.SETTLED
        if self.paid > 0:
            return SettlementState.PARTIALLY_PAID
        return SettlementState.UNPAID

    def is_settled(self) -> bool:
        return self.settlement_state == SettlementState.SETTLED
