"""Mini README: Tests for the FastAPI finance tracker interface.

Drives the form routes through ``TestClient`` against an in-memory state and
checks that pages render and JSON endpoints expose the projection.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from pennywise.configuration import PennywiseSettings
from pennywise.interface import create_application
from pennywise.state import AppState
from pennywise.storage import InMemoryStorage


@pytest.fixture()
def client(tmp_path) -> TestClient:
    settings = PennywiseSettings(data_directory=tmp_path, storage_backend="memory")
    app = create_application(settings=settings, state=AppState.load(InMemoryStorage()))
    return TestClient(app)


def _add(client: TestClient, **fields: str):
    form = {"description": "Coffee", "amount": "5", "type": "Expense", "category": "Food", "date": "2024-03-02"}
    form.update(fields)
    return client.post("/transactions", data=form, follow_redirects=False)


def test_add_transaction_redirects_and_updates_summary(client: TestClient) -> None:
    assert _add(client).status_code == 303
    _add(client, description="Salary", amount="2000", type="Income", category="Salary", date="2024-03-01")

    payload = client.get("/api/summary").json()
    assert payload["summary"] == {"income": 2000.0, "expenses": -5.0, "balance": 1995.0}
    assert [entry["description"] for entry in payload["transactions"]] == ["Salary", "Coffee"]
    assert payload["categories"] == {"labels": ["Food"], "totals": [5.0]}


def test_add_transaction_rejects_blank_description(client: TestClient) -> None:
    response = _add(client, description="")
    assert response.status_code == 400
    assert client.get("/api/transactions").json() == {"transactions": []}


def test_delete_and_clear(client: TestClient) -> None:
    _add(client)
    _add(client, description="Bus", category="Transport")
    transactions = client.get("/api/transactions").json()["transactions"]

    response = client.post(f"/transactions/{transactions[0]['id']}/delete", follow_redirects=False)
    assert response.status_code == 303
    assert client.post("/transactions/999/delete", follow_redirects=False).status_code == 303
    assert len(client.get("/api/transactions").json()["transactions"]) == 1

    assert client.post("/transactions/clear", data={}, follow_redirects=False).status_code == 400
    assert client.post("/transactions/clear", data={"confirm": "yes"}, follow_redirects=False).status_code == 303
    assert client.get("/api/transactions").json() == {"transactions": []}


def test_filter_changes_projection(client: TestClient) -> None:
    _add(client, date="2024-03-01")
    _add(client, description="Rent", amount="700", category="Bills", date="2024-04-01")

    response = client.post("/filter", data={"month": "2024-03", "next": "/transactions"}, follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/transactions"

    payload = client.get("/api/summary").json()
    assert payload["month"] == "2024-03"
    assert [entry["description"] for entry in payload["transactions"]] == ["Coffee"]
    assert client.get("/api/summary", params={"month": "2024-04"}).json()["summary"]["expenses"] == -700.0
    assert client.post("/filter", data={"month": "March"}).status_code == 400
    assert client.get("/api/summary", params={"month": "2024-99"}).status_code == 400


def test_dark_mode_toggle_and_pages_render(client: TestClient) -> None:
    _add(client)
    response = client.post("/dark-mode", data={"next": "//evil.example"}, follow_redirects=False)
    assert response.headers["location"] == "/"
    assert client.get("/api/summary").json()["dark_mode"] is True

    dashboard = client.get("/")
    assert dashboard.status_code == 200
    assert 'class="dark"' in dashboard.text
    assert "Expenses: $5.00" in dashboard.text

    transactions = client.get("/transactions")
    assert transactions.status_code == 200
    assert "-$5.00" in transactions.text
    assert "class=\"expense-item\"" in transactions.text


def test_get_unknown_transaction_returns_404(client: TestClient) -> None:
    assert client.get("/api/transactions/123").status_code == 404
