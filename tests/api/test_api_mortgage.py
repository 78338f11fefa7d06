import pytest


def test_mortgage_contract(client):
    r = client.post(
        "/api/mortgage/calculate",
        json={"loanAmount": 450000, "downPayment": 90000, "interestRate": 6.5, "loanTerm": 30},
    )
    assert r.status_code == 200, r.text
    data = r.json()
    assert set(data) == {"monthlyPayment", "totalInterest", "totalAmount", "principal"}
    assert data["principal"] == 360000
    assert data["monthlyPayment"] == pytest.approx(2275.12, abs=1)
    assert data["totalAmount"] == pytest.approx(data["principal"] + data["totalInterest"], abs=0.01)


def test_mortgage_accepts_numeric_strings(client):
    r = client.post(
        "/api/mortgage/calculate",
        json={"loanAmount": "300000", "downPayment": "0", "interestRate": "6", "loanTerm": 30},
    )
    assert r.status_code == 200, r.text
    assert r.json()["monthlyPayment"] == 1798.65


@pytest.mark.parametrize(
    "payload",
    [
        {"loanAmount": "abc", "downPayment": 0, "interestRate": 6, "loanTerm": 30},
        {"loanAmount": 300000, "downPayment": 0, "interestRate": 6, "loanTerm": 0},
        {"loanAmount": 300000, "downPayment": 0, "interestRate": -1, "loanTerm": 30},
        {"downPayment": 0, "interestRate": 6, "loanTerm": 30},
    ],
)
def test_mortgage_rejects_bad_input(client, payload):
    r = client.post("/api/mortgage/calculate", json=payload)
    assert r.status_code == 422


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
