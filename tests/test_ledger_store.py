"""Tests for the ledger store collections and snapshot handling."""

import pytest
from pydantic import ValidationError as SchemaError

from indent_ledger.core.errors import NotFoundError, ValidationError
from indent_ledger.repositories.ledger_store import LedgerStore


def test_get_shipment(store, billed):
    store.shipments = [billed("a", 10)]
    assert store.get_shipment("a").total_indent == 10


def test_get_shipment_missing(store):
    with pytest.raises(NotFoundError):
        store.get_shipment("nope")
    with pytest.raises(ValidationError):
        store.get_shipment("")


def test_mark_invoice_submitted_is_idempotent(store):
    store.mark_invoice_submitted("INV-1")
    store.mark_invoice_submitted("INV-2")
    store.mark_invoice_submitted("INV-1")
    assert store.submitted_invoices == ["INV-1", "INV-2"]


def test_employee_names_merge_staff(store):
    assert store.employee_names() == ["Rahim", "Karim", "Samim"]


def test_snapshot_uses_wire_names(store, billed):
    store.shipments = [billed("a", 10)]
    snapshot = store.snapshot()

    assert "submittedInvoices" in snapshot
    assert snapshot["lists"]["subAccounts"] == ["Main", "Rent"]
    assert snapshot["shipments"][0]["invoiceNo"] == "INV-a"


def test_apply_snapshot_ignores_unknown_keys(store):
    applied = store.apply_snapshot({"trucks": [{"truckNo": "1"}], "submittedInvoices": ["X"]})
    assert applied == ["submittedInvoices"]
    assert store.submitted_invoices == ["X"]


def test_apply_snapshot_rejects_bad_data(store):
    with pytest.raises(SchemaError):
        store.apply_snapshot({"submittedInvoices": ["X"], "transactions": [{"type": "Barter", "amount": 1}]})
    assert store.submitted_invoices == []


def test_accepts_records_with_blank_quantities():
    store = LedgerStore.model_validate({
        "shipments": [{"id": "s1", "invoiceNo": "A", "docQty": "", "paid": None, "remarks": None}],
    })
    shipment = store.shipments[0]
    assert shipment.doc_qty == 0
    assert shipment.paid == 0
    assert shipment.remarks == ""
