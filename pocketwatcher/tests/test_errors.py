"""
Tests for error responses outside the domain taxonomy.
"""
from fastapi.testclient import TestClient
from pocketwatcher.main import app


def test_oversized_record_id_rejected(client, register):
    headers = register()
    response = client.delete("/delete-expense/99999999999999999999999", headers=headers)
    assert response.status_code == 400
    assert "error" in response.json()

    response = client.put("/settle-debt/99999999999999999999999", headers=headers)
    assert response.status_code == 400


def test_non_positive_record_id_rejected(client, register):
    headers = register()
    assert client.get("/debt/0", headers=headers).status_code == 400


def test_unexpected_error_returns_json(register, monkeypatch):
    """Unexpected failures still answer with the error envelope."""
    headers = register()

    def broken_list(user_id, db):
        raise RuntimeError("boom")

    monkeypatch.setattr("pocketwatcher.services.expense_service.list_expenses", broken_list)
    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/all-expenses", headers=headers)
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
