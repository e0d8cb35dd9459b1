"""
LedgerStore - the explicit repository the engine operates on.

Holds every collection the application owns. Services receive a store
instance instead of reaching for shared state, so each can be exercised
against a store built in a test.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from indent_ledger.core.errors import NotFoundError, ValidationError
from indent_ledger.models.base import LedgerModel
from indent_ledger.models.employee import Employee
from indent_ledger.models.price_rule import PriceRule
from indent_ledger.models.reference import ReferenceLists
from indent_ledger.models.shipment import Shipment
from indent_ledger.models.transaction import Transaction


class LedgerStore(LedgerModel):
    shipments: List[Shipment] = Field(default_factory=list)
    transactions: List[Transaction] = Field(default_factory=list)
    employees: List[Employee] = Field(default_factory=list)
    prices: List[PriceRule] = Field(default_factory=list)
    lists: ReferenceLists = Field(default_factory=ReferenceLists)
    submitted_invoices: List[str] = Field(default_factory=list)
    settings: Dict[str, Any] = Field(default_factory=dict)

    # Shipments

    def get_shipment(self, shipment_id: str) -> Shipment:
        if not shipment_id:
            raise ValidationError("Shipment id is required")
        for shipment in self.shipments:
            if shipment.id == shipment_id:
                return shipment
        raise NotFoundError(f"Shipment {shipment_id} not found")

    def shipments_for_employee(self, employee_name: str) -> List[Shipment]:
        """Shipments owned by an employee, in collection order."""
        return [s for s in self.shipments if s.employee_name == employee_name]

    def remove_shipment(self, shipment_id: str) -> Shipment:
        shipment = self.get_shipment(shipment_id)
        self.shipments = [s for s in self.shipments if s.id != shipment_id]
        return shipment

    def mark_invoice_submitted(self, invoice_no: str) -> None:
        if invoice_no and invoice_no not in self.submitted_invoices:
            self.submitted_invoices.append(invoice_no)

    # Transactions

    def get_transaction(self, transaction_id: str) -> Transaction:
        for transaction in self.transactions:
            if transaction.id == transaction_id:
                return transaction
        raise NotFoundError(f"Transaction {transaction_id} not found")

    def remove_transaction(self, transaction_id: str) -> Transaction:
        transaction = self.get_transaction(transaction_id)
        self.transactions = [t for t in self.transactions if t.id != transaction_id]
        return transaction

    # Reference data

    def employee_names(self) -> List[str]:
        names = [e.name for e in self.employees]
        names.extend(n for n in self.lists.staff if n not in names)
        return names

    def sub_account_names(self) -> List[str]:
        return list(self.lists.sub_accounts)

    def get_price_rule(self, rule_id: str) -> Optional[PriceRule]:
        for rule in self.prices:
            if rule.id == rule_id:
                return rule
        return None

    # Snapshots

    def snapshot(self) -> dict:
        """Every collection, keyed by its wire name."""
        return self.model_dump(by_alias=True, mode="json")

    def apply_snapshot(self, data: Dict[str, Any]) -> List[str]:
        """
        Replace each collection present in `data` wholesale.

        The whole payload is validated before anything is assigned, so a bad
        snapshot leaves the store untouched. Unknown keys are ignored.
        Returns the wire names of the collections that were replaced.
        """
        fields = {
            (info.alias or name): name
            for name, info in type(self).model_fields.items()
        }
        present = {key: value for key, value in data.items() if key in fields}
        incoming = type(self).model_validate(present)

        for key in present:
            name = fields[key]
            setattr(self, name, getattr(incoming, name))
        return list(present)
