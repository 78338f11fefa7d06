from decimal import Decimal


def test_net_sheet_by_zip(client):
    r = client.post(
        "/api/v1/net-sheet",
        json={"sale_price": 800000, "zip_code": "90210", "mortgage_balance": 300000},
    )
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["jurisdiction"] == "CA"
    total = sum(Decimal(str(item["amount"])) for item in data["breakdown_items"])
    assert total == Decimal(str(data["total_deductions"]))
    assert Decimal(str(data["net_proceeds"])) + total == Decimal("800000")


def test_jurisdiction_wins_over_zip(client):
    r = client.post(
        "/api/v1/net-sheet",
        json={"sale_price": 400000, "jurisdiction": "TX", "zip_code": "90210"},
    )
    assert r.json()["jurisdiction"] == "TX"


def test_net_sheet_negative_proceeds(client):
    r = client.post(
        "/api/v1/net-sheet", json={"sale_price": 200000, "mortgage_balance": 250000}
    )
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["seller_owes_at_closing"] is True
    assert Decimal(str(data["net_proceeds"])) < 0


def test_net_sheet_rejects_zero_price(client):
    assert client.post("/api/v1/net-sheet", json={"sale_price": 0}).status_code == 422


def test_jurisdictions_listed(client):
    r = client.get("/api/v1/net-sheet/jurisdictions")
    assert r.status_code == 200
    codes = {p["code"] for p in r.json()}
    assert {"CA", "NY", "TX", "DEFAULT"} <= codes
