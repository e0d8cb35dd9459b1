"""
Settlement ledger - applies payments to shipments.

Every operation validates before it mutates, so a rejected payment leaves
the store exactly as it was.
"""

import logging
import math
from typing import Optional

from indent_ledger.core.config import settings
from indent_ledger.core.errors import ValidationError
from indent_ledger.models.settlement import Allocation, AllocationResult, AllocationShortfall
from indent_ledger.models.shipment import Shipment
from indent_ledger.repositories.ledger_store import LedgerStore

logger = logging.getLogger(__name__)

REMARKS_SEPARATOR = " | "


def is_positive_amount(amount: float) -> bool:
    """False for zero, negatives, NaN and infinities."""
    return math.isfinite(amount) and amount > 0


def append_remark(existing: str, note: Optional[str]) -> str:
    note = (note or "").strip()
    if not note:
        return existing
    return f"{existing}{REMARKS_SEPARATOR}{note}" if existing else note


class SettlementLedger:
    def __init__(self, store: LedgerStore, epsilon: Optional[float] = None):
        self.store = store
        self.epsilon = settings.PAYMENT_EPSILON if epsilon is None else epsilon

    def submit_bill(self, shipment_id: str, amount: float, note: Optional[str] = None) -> Shipment:
        """
        Record a bill collection against one shipment.

        - amount must be positive and no more than the current due (+ epsilon)
        - note is appended to remarks
        - the invoice joins the submitted-invoices set
        """
        shipment = self.store.get_shipment(shipment_id)

        if not is_positive_amount(amount):
            raise ValidationError("Payment amount must be greater than zero")

        due = shipment.due
        if amount > due + self.epsilon:
            raise ValidationError(
                f"Payment {amount:.2f} exceeds due balance {due:.2f} for invoice {shipment.invoice_no}"
            )

        shipment.paid += amount
        shipment.remarks = append_remark(shipment.remarks, note)
        self.store.mark_invoice_submitted(shipment.invoice_no)

        logger.info(
            f"Bill submitted for shipment {shipment.id} ({shipment.invoice_no}): "
            f"{amount:.2f}, due now {shipment.due:.2f}"
        )
        return shipment

    def quick_settle(self, shipment_id: str) -> Shipment:
        """Mark a shipment fully paid. Overwrites paid, so repeating it changes nothing."""
        shipment = self.store.get_shipment(shipment_id)
        shipment.paid = shipment.total_indent
        logger.info(f"Shipment {shipment.id} ({shipment.invoice_no}) settled in full")
        return shipment

    def allocate_fifo(self, employee_name: str, amount: float) -> AllocationResult:
        """
        Spread a lump payment over an employee's outstanding shipments.

        Shipments are taken in collection order; each receives
        min(remaining, due). Whatever cannot be placed is reported as a
        shortfall on the result.
        """
        if not employee_name:
            raise ValidationError("Employee name is required")
        if not is_positive_amount(amount):
            raise ValidationError("Allocation amount must be greater than zero")

        result = AllocationResult(employee_name=employee_name, requested=amount)
        remaining = amount

        for shipment in self.store.shipments_for_employee(employee_name):
            if remaining <= 0:
                break
            due = shipment.due
            if due <= 0:
                continue

            pay = min(remaining, due)
            shipment.paid += pay
            remaining -= pay
            result.allocations.append(Allocation(
                shipment_id=shipment.id,
                invoice_no=shipment.invoice_no,
                amount=pay,
                due_after=shipment.due,
            ))

        leftover = round(remaining, 2)
        if leftover > 0:
            result.shortfall = AllocationShortfall(employee_name=employee_name, unallocated=leftover)
            logger.warning(f"Allocation for {employee_name}: {leftover:.2f} of {amount:.2f} could not be placed")

        logger.info(f"Allocated {result.allocated:.2f} across {len(result.allocations)} shipments for {employee_name}")
        return result

    def pay_association_fee(self, shipment_id: str, amount: float, remarks: Optional[str] = None) -> Shipment:
        """Record an association fee payment. Not capped by the 85/doc estimate."""
        shipment = self.store.get_shipment(shipment_id)

        if not is_positive_amount(amount):
            raise ValidationError("Amount must be greater than zero")

        shipment.association_paid += amount
        if remarks and remarks.strip():
            shipment.association_remarks = remarks.strip()

        logger.info(f"Association fee {amount:.2f} posted for shipment {shipment.id} ({shipment.invoice_no})")
        return shipment
