"""
Tests for expense endpoints.
"""
import pytest


def test_create_expense(client, register):
    """Test expense creation."""
    headers = register()
    response = client.post(
        "/add-expense",
        json={"title": "Coffee", "amount": 50, "category": "Food"},
        headers=headers
    )
    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Coffee"
    assert body["amount"] == 50
    assert body["category"] == "Food"
    assert "id" in body and "date" in body
    assert body["_id"] == body["id"]


def test_category_defaults_to_general(client, register):
    headers = register()
    response = client.post("/add-expense", json={"title": "Misc", "amount": 10}, headers=headers)
    assert response.status_code == 201
    assert response.json()["category"] == "General"


@pytest.mark.parametrize("payload", [
    {"amount": 10},
    {"title": "Lunch"},
    {"title": "   ", "amount": 10},
    {"title": "Lunch", "amount": 0},
    {"title": "Lunch", "amount": -5},
    {"title": "Lunch", "amount": "lots"},
    {"title": "Lunch", "amount": True},
    {"title": "Lunch", "amount": 10, "category": "Travel"},
])
def test_create_expense_invalid(client, register, payload):
    headers = register()
    response = client.post("/add-expense", json=payload, headers=headers)
    assert response.status_code == 400
    assert "error" in response.json()


def test_list_expenses_newest_first(client, register):
    headers = register()
    for title in ["First", "Second", "Third"]:
        client.post("/add-expense", json={"title": title, "amount": 1}, headers=headers)

    response = client.get("/all-expenses", headers=headers)
    assert response.status_code == 200
    assert [e["title"] for e in response.json()] == ["Third", "Second", "First"]


def test_expenses_isolated_between_users(client, register):
    alice = register(name="Alice", email="alice@example.com")
    bob = register(name="Bob", email="bob@example.com")
    client.post("/add-expense", json={"title": "Rent", "amount": 900}, headers=alice)

    assert client.get("/all-expenses", headers=bob).json() == []
    assert len(client.get("/all-expenses", headers=alice).json()) == 1


def test_delete_expense(client, register):
    """Test expense deletion and repeat deletion."""
    headers = register()
    expense_id = client.post(
        "/add-expense", json={"title": "Taxi", "amount": 120}, headers=headers
    ).json()["id"]

    response = client.delete(f"/delete-expense/{expense_id}", headers=headers)
    assert response.status_code == 200
    assert response.json()["success"] is True
    assert client.get("/all-expenses", headers=headers).json() == []

    again = client.delete(f"/delete-expense/{expense_id}", headers=headers)
    assert again.status_code == 404


def test_delete_other_users_expense_forbidden(client, register):
    alice = register(name="Alice", email="alice@example.com")
    bob = register(name="Bob", email="bob@example.com")
    expense_id = client.post(
        "/add-expense", json={"title": "Rent", "amount": 900}, headers=alice
    ).json()["id"]

    response = client.delete(f"/delete-expense/{expense_id}", headers=bob)
    assert response.status_code == 403
    assert len(client.get("/all-expenses", headers=alice).json()) == 1

    assert client.get(f"/expense/{expense_id}", headers=bob).status_code == 403
    assert client.get(f"/expense/{expense_id}", headers=alice).status_code == 200


def test_get_missing_expense(client, register):
    headers = register()
    assert client.get("/expense/12345", headers=headers).status_code == 404


def test_expense_summary(client, register):
    alice = register(name="Alice", email="alice@example.com")
    bob = register(name="Bob", email="bob@example.com")
    client.post("/add-expense", json={"title": "Lunch", "amount": 30, "category": "Food"}, headers=alice)
    client.post("/add-expense", json={"title": "Dinner", "amount": 50, "category": "Food"}, headers=alice)
    client.post("/add-expense", json={"title": "Bus", "amount": 20, "category": "Transport"}, headers=alice)
    client.post("/add-expense", json={"title": "Other", "amount": 999}, headers=bob)

    summary = client.get("/expense-summary", headers=alice).json()
    assert summary["total_expenses"] == 100
    assert summary["expense_count"] == 3
    assert summary["categories"][0] == {
        "category": "Food",
        "total_amount": 80,
        "expense_count": 2,
        "percentage": 80.0
    }
    assert summary["categories"][1]["category"] == "Transport"


def test_expense_summary_empty(client, register):
    headers = register()
    summary = client.get("/expense-summary", headers=headers).json()
    assert summary == {"total_expenses": 0, "expense_count": 0, "categories": []}
