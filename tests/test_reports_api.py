"""Tests for the report and rate endpoints."""


def test_employee_accounts(test_client, store, billed):
    store.shipments = [billed("a", 100, paid=50), billed("b", 300, employee="Karim"), billed("c", 20, employee="")]

    accounts = test_client.get("/api/v1/reports/employees").json()

    assert [a["name"] for a in accounts] == ["Karim", "Rahim", "Unknown Operator"]
    assert accounts[1] == {"name": "Rahim", "totalIndent": 100, "paid": 50, "due": 50, "count": 1}


def test_association_summary(test_client, store, billed):
    shipment = billed("a", 100)
    shipment.doc_qty = 2
    shipment.association_paid = 50
    store.shipments = [shipment]

    summary = test_client.get("/api/v1/reports/association").json()

    assert summary == {"qty": 2, "amount": 170, "paid": 50, "due": 120}


def test_resolve_rates(test_client):
    rates = test_client.get(
        "/api/v1/rates/resolve",
        params={"buyer": "h&m", "shipper": "confidence", "depot": "kds"},
    ).json()

    assert rates["doc"] == 220
    assert rates["unload"] == 150
    assert rates["con"] == 200
    assert rates["office"] == 75
    assert rates["association"] == 85


def test_price_rule_lifecycle(test_client, store, shipment_record):
    test_client.post("/api/v1/shipments/", json=shipment_record)

    created = test_client.post(
        "/api/v1/rates/prices",
        json={"category": "CON", "condition": "OCL", "rate": 400},
    )

    assert created.status_code == 201
    assert store.shipments[0].total_indent == 5263
    assert len(test_client.get("/api/v1/rates/prices").json()) == 1

    rule_id = created.json()["id"]
    assert test_client.delete(f"/api/v1/rates/prices/{rule_id}").status_code == 200
    assert store.shipments[0].total_indent == 5013
    assert test_client.delete(f"/api/v1/rates/prices/{rule_id}").status_code == 404


def test_price_rule_rejects_negative_rate(test_client):
    response = test_client.post(
        "/api/v1/rates/prices",
        json={"category": "DOC", "condition": "ZARA", "rate": -1},
    )
    assert response.status_code == 422


def test_accounts_summary(test_client, store, billed):
    store.shipments = [billed("a", 1000, paid=400)]
    test_client.post("/api/v1/transactions/cash-in", json={"subAccount": "Main", "amount": 100})

    summary = test_client.get("/api/v1/reports/accounts").json()

    assert summary == {"totalBilled": 1000, "totalCollection": 500, "cashOut": 0, "outstanding": 500}
