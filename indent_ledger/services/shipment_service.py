"""Shipment entry, edits and the read-side views built on them."""

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaError

from indent_ledger.core.errors import ValidationError
from indent_ledger.models.report import AssociationSummary, EmployeeAccount
from indent_ledger.models.shipment import INDENT_FIELDS, SETTLED_TOLERANCE, Shipment
from indent_ledger.repositories.ledger_store import LedgerStore
from indent_ledger.services.indent_calculator import IndentBreakdown, apply_indent, calculate_indent

logger = logging.getLogger(__name__)

UNKNOWN_OPERATOR = "Unknown Operator"

# Settlement and identity fields are owned by other operations
_NOT_EDITABLE = frozenset({"id", "total_indent", "paid", "association_paid"})


_FIELD_BY_ALIAS = {info.alias: name for name, info in Shipment.model_fields.items() if info.alias}


def _by_field_name(record: Dict[str, Any]) -> Dict[str, Any]:
    return {_FIELD_BY_ALIAS.get(key, key): value for key, value in record.items()}


def _validate(record: Dict[str, Any]) -> Shipment:
    try:
        return Shipment.model_validate(record)
    except SchemaError as exc:
        raise ValidationError(f"Invalid shipment record: {exc.error_count()} invalid fields") from exc


class ShipmentService:
    def __init__(self, store: LedgerStore):
        self.store = store

    def create(self, record: Dict[str, Any]) -> Shipment:
        """Post a new shipment. invoiceNo is required; paid starts at 0."""
        shipment = _validate({**_by_field_name(record), "paid": 0, "total_indent": 0})
        shipment.invoice_no = shipment.invoice_no.strip().upper()
        if not shipment.invoice_no:
            raise ValidationError("Invoice No is required")

        apply_indent(shipment, self.store.prices)
        self.store.shipments.insert(0, shipment)
        logger.info(f"Shipment {shipment.id} posted: invoice {shipment.invoice_no}, indent {shipment.total_indent:.2f}")
        return shipment

    def update(self, shipment_id: str, changes: Dict[str, Any]) -> Shipment:
        """Apply an edit; any change to a rate or quantity field recomputes the indent in full."""
        shipment = self.store.get_shipment(shipment_id)
        # A null in an edit means the field was left alone
        changes = {name: value for name, value in _by_field_name(changes).items() if value is not None}

        # Validate the merged record before touching the stored one
        merged = _validate({**shipment.model_dump(), **changes})
        updates = {
            name: getattr(merged, name)
            for name in merged.model_fields_set
            if name not in _NOT_EDITABLE and getattr(merged, name) != getattr(shipment, name)
        }
        if "invoice_no" in updates:
            updates["invoice_no"] = updates["invoice_no"].strip().upper()
            if not updates["invoice_no"]:
                raise ValidationError("Invoice No is required")

        for name, value in updates.items():
            setattr(shipment, name, value)

        if INDENT_FIELDS & set(updates):
            apply_indent(shipment, self.store.prices)
            logger.info(f"Shipment {shipment.id} indent recomputed: {shipment.total_indent:.2f}")
        return shipment

    def delete(self, shipment_id: str) -> Shipment:
        shipment = self.store.remove_shipment(shipment_id)
        logger.info(f"Shipment {shipment_id} ({shipment.invoice_no}) removed")
        return shipment

    def recompute_all(self) -> None:
        """Re-derive every total, e.g. after price rules change."""
        for shipment in self.store.shipments:
            apply_indent(shipment, self.store.prices)

    def breakdown(self, shipment_id: str) -> IndentBreakdown:
        return calculate_indent(self.store.get_shipment(shipment_id), self.store.prices)

    def preview(self, record: Dict[str, Any]) -> IndentBreakdown:
        return calculate_indent(_validate(record), self.store.prices)

    def list_all(self, employee_name: Optional[str] = None) -> List[Shipment]:
        if employee_name is None:
            return list(self.store.shipments)
        return self.store.shipments_for_employee(employee_name)

    def pending(self, search: str = "") -> List[Shipment]:
        """Shipments still owing more than the settlement tolerance."""
        needle = search.lower()
        return [
            s for s in self.store.shipments
            if s.due > SETTLED_TOLERANCE
            and (needle in s.invoice_no.lower() or needle in s.shipper.lower())
        ]

    def paid(self) -> List[Shipment]:
        return [s for s in self.store.shipments if s.paid > 0]

    def employee_accounts(self) -> List[EmployeeAccount]:
        groups: Dict[str, EmployeeAccount] = {}
        for s in self.store.shipments:
            name = s.employee_name or UNKNOWN_OPERATOR
            account = groups.setdefault(name, EmployeeAccount(name=name))
            account.total_indent += s.total_indent
            account.paid += s.paid
            account.count += 1

        for account in groups.values():
            account.due = account.total_indent - account.paid
        return sorted(groups.values(), key=lambda a: a.due, reverse=True)

    def association_summary(self) -> AssociationSummary:
        summary = AssociationSummary()
        for s in self.store.shipments:
            summary.qty += s.doc_qty
            summary.amount += s.association_fee_estimate
            summary.paid += s.association_paid
        summary.due = summary.amount - summary.paid
        return summary
