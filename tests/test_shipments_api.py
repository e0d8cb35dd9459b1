"""Tests for the shipment endpoints."""

API = "/api/v1/shipments"


def test_create_shipment(test_client, store, mock_db, shipment_record):
    response = test_client.post(f"{API}/", json=shipment_record)

    assert response.status_code == 201
    body = response.json()
    assert body["totalIndent"] == 5013
    assert body["paid"] == 0
    assert body["outstanding"] == 5013
    assert body["status"] == "unpaid"
    assert store.shipments[0].id == body["id"]
    mock_db.snapshots.replace_one.assert_awaited_once()


def test_create_shipment_requires_invoice(test_client, shipment_record):
    shipment_record["invoiceNo"] = "  "
    response = test_client.post(f"{API}/", json=shipment_record)

    assert response.status_code == 400
    assert response.json()["detail"] == "Invoice No is required"


def test_create_shipment_blank_quantities(test_client):
    response = test_client.post(f"{API}/", json={"invoiceNo": "a-1", "docQty": "", "ctnQty": None, "otherAmt": 50})

    assert response.status_code == 201
    assert response.json()["invoiceNo"] == "A-1"
    assert response.json()["totalIndent"] == 50


def test_preview_does_not_store(test_client, store, shipment_record):
    response = test_client.post(f"{API}/preview", json=shipment_record)

    assert response.status_code == 200
    body = response.json()
    assert body["depotIndent"] == 3413
    assert body["associationFee"] == 850
    assert body["officeIncome"] == 750
    assert body["totalIndent"] == 5013
    assert body["rates"]["doc"] == 220
    assert store.shipments == []


def test_get_shipment_and_breakdown(test_client, shipment_record):
    shipment_id = test_client.post(f"{API}/", json=shipment_record).json()["id"]

    assert test_client.get(f"{API}/{shipment_id}").json()["invoiceNo"] == "INV-001"
    assert test_client.get(f"{API}/{shipment_id}/indent").json()["totalIndent"] == 5013


def test_get_missing_shipment(test_client):
    response = test_client.get(f"{API}/does-not-exist")
    assert response.status_code == 404


def test_list_shipments_by_employee(test_client, store, billed):
    store.shipments = [billed("a", 10), billed("b", 20, employee="Karim")]

    assert len(test_client.get(f"{API}/").json()) == 2
    only_karim = test_client.get(f"{API}/", params={"employee": "Karim"}).json()
    assert [s["id"] for s in only_karim] == ["b"]


def test_update_recomputes(test_client, shipment_record):
    shipment_id = test_client.post(f"{API}/", json=shipment_record).json()["id"]

    response = test_client.patch(f"{API}/{shipment_id}", json={"otherAmt": 200})

    assert response.status_code == 200
    assert response.json()["totalIndent"] == 5113


def test_update_ignores_paid(test_client, shipment_record):
    shipment_id = test_client.post(f"{API}/", json=shipment_record).json()["id"]

    response = test_client.patch(f"{API}/{shipment_id}", json={"remarks": "checked", "paid": 5013})

    assert response.json()["remarks"] == "checked"
    assert response.json()["paid"] == 0


def test_delete_shipment(test_client, store, billed):
    store.shipments = [billed("a", 10)]

    assert test_client.delete(f"{API}/a").status_code == 200
    assert store.shipments == []
    assert test_client.delete(f"{API}/a").status_code == 404


def test_pending_and_paid(test_client, store, billed):
    store.shipments = [
        billed("a", 100),
        billed("b", 100, paid=40),
        billed("c", 100, paid=100),
    ]

    pending = test_client.get(f"{API}/pending").json()
    assert [s["id"] for s in pending] == ["a", "b"]
    assert pending[1]["status"] == "partially_paid"

    paid = test_client.get(f"{API}/paid").json()
    assert [s["id"] for s in paid] == ["b", "c"]
    assert paid[1]["status"] == "settled"


def test_pending_search(test_client, store, billed):
    store.shipments = [billed("a", 100, invoice="EXP-77"), billed("b", 100)]

    pending = test_client.get(f"{API}/pending", params={"search": "exp"}).json()
    assert [s["id"] for s in pending] == ["a"]


def test_update_with_nulls_changes_nothing(test_client, shipment_record):
    created = test_client.post(f"{API}/", json=shipment_record).json()

    response = test_client.patch(f"{API}/{created['id']}", json={"date": None, "docQty": None, "buyer": None})

    assert response.status_code == 200
    assert response.json()["date"] == created["date"]
    assert response.json()["buyer"] == "H&M"
    assert response.json()["totalIndent"] == 5013

