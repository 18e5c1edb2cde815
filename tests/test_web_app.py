"""Mini README: Tests for the FastAPI JSON interface.

Each test builds the application around an in-memory ledger and drives it
through ``TestClient`` to confirm routes map ledger errors to HTTP 400.
"""

from __future__ import annotations

import json
from datetime import date

import pytest
from fastapi.testclient import TestClient

from balancetracker.interface import create_application
from balancetracker.ledger import Ledger
from balancetracker.storage import MemoryStorage


@pytest.fixture()
def ledger() -> Ledger:
    return Ledger(MemoryStorage())


@pytest.fixture()
def client(ledger: Ledger) -> TestClient:
    return TestClient(create_application(ledger))


def test_add_entry_and_read_state(client: TestClient) -> None:
    response = client.post("/api/entries", json={"expression": "100", "description": "Initial"})
    assert response.status_code == 200
    assert response.json()["delta"] == pytest.approx(100)

    response = client.post("/api/entries", json={"expression": "50+25", "description": "Bonus"})
    state = response.json()["state"]
    assert state["balance"] == pytest.approx(175)
    assert state["entries"] == 2
    assert state["outlook"]["days_left"] == 1

    assert client.get("/api/state").json()["balance"] == pytest.approx(175)


@pytest.mark.parametrize(
    "body",
    [
        {"expression": "", "description": "x"},
        {"expression": "1+", "description": "x"},
        {"expression": "import os", "description": "x"},
        {"expression": "10", "description": "   "},
    ],
)
def test_add_entry_rejects_bad_input(client: TestClient, ledger: Ledger, body: dict) -> None:
    response = client.post("/api/entries", json=body)

    assert response.status_code == 400
    assert ledger.state.history == []


def test_history_lists_newest_first(client: TestClient, ledger: Ledger) -> None:
    for amount in ("1", "2", "3"):
        ledger.add_entry(amount, f"entry {amount}")

    history = client.get("/api/history", params={"limit": 2}).json()["history"]

    assert [item["desc"] for item in history] == ["entry 3", "entry 2"]


def test_undo_route_reports_whether_anything_changed(client: TestClient, ledger: Ledger) -> None:
    assert client.post("/api/undo").json()["undone"] is False

    ledger.add_entry("10", "a")
    payload = client.post("/api/undo").json()

    assert payload["undone"] is True
    assert payload["state"]["balance"] == 0


def test_expiry_route_clamps_past_dates(client: TestClient, ledger: Ledger) -> None:
    client.put("/api/expiry", json={"expiry": "2000-01-01"})
    assert ledger.state.expiry == date.today().isoformat()

    client.put("/api/expiry", json={"expiry": "2999-12-31"})
    assert ledger.state.expiry == "2999-12-31"

    assert client.put("/api/expiry", json={"expiry": "soon"}).status_code == 422


def test_export_then_import_restores_state(client: TestClient, ledger: Ledger) -> None:
    ledger.add_entry("250", "Salary")
    ledger.add_entry("-40.5", "Dinner")

    exported = client.get("/api/export")
    assert exported.status_code == 200
    assert "balance-backup.json" in exported.headers["content-disposition"]
    snapshot = exported.json()

    ledger.undo()
    ledger.undo()
    response = client.post(
        "/api/import",
        files={"backup": ("balance-backup.json", exported.content, "application/json")},
    )

    assert response.status_code == 200
    assert ledger.state.as_dict() == snapshot


def test_import_rejects_invalid_backup(client: TestClient, ledger: Ledger) -> None:
    ledger.add_entry("5", "keep")

    response = client.post(
        "/api/import",
        files={"backup": ("bad.json", json.dumps({"history": []}).encode(), "application/json")},
    )

    assert response.status_code == 400
    assert ledger.state.balance == pytest.approx(5)


def test_import_rejects_non_finite_numbers(client: TestClient, ledger: Ledger) -> None:
    response = client.post(
        "/api/import",
        files={"backup": ("bad.json", b'{"version": 1, "history": [{"delta": NaN}]}', "application/json")},
    )

    assert response.status_code == 400
    assert ledger.state.history == []


def test_add_entry_rejects_deep_nesting(client: TestClient) -> None:
    response = client.post("/api/entries", json={"expression": "(" * 5000 + "1" + ")" * 5000, "description": "x"})

    assert response.status_code == 400
