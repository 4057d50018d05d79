"""
Tests for the account API endpoints.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from ledgerx.dependencies import get_store
from ledgerx.main import app


def create_account(client, code="1000", name="Cash", account_type="Asset", **extra):
    return client.post("/accounts", json={
        "code": code, "name": name, "account_type": account_type, **extra,
    })


class TestCreateAccount:

    def test_create_account(self, client):
        response = create_account(client, balance="250.50")
        assert response.status_code == 201

        data = response.json()
        assert data["code"] == "1000"
        assert data["name"] == "Cash"
        assert data["account_type"] == "Asset"
        assert Decimal(data["balance"]) == Decimal("250.50")
        assert data["is_active"] is True
        assert response.headers["location"].endswith(f"/accounts/{data['id']}")

    def test_location_header_resolves(self, client):
        response = create_account(client)
        fetched = client.get(response.headers["location"])
        assert fetched.status_code == 200
        assert fetched.json()["id"] == response.json()["id"]

    def test_duplicate_code_conflict(self, client):
        create_account(client)
        response = create_account(client, name="Cash again")

        assert response.status_code == 409
        assert response.json() == {"message": "Account with code 1000 already exists"}

    def test_missing_code(self, client):
        response = create_account(client, code="")
        assert response.status_code == 400
        assert response.json() == {"message": "Account code is required"}

    def test_invalid_type(self, client):
        response = create_account(client, account_type="Cash")
        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid account type")

    def test_type_accepted_for_account_type(self, client):
        response = client.post("/accounts", json={
            "code": "1000", "name": "Cash", "type": "Asset",
        })
        assert response.status_code == 201
        assert response.json()["account_type"] == "Asset"

    def test_malformed_body(self, client):
        response = client.post("/accounts", json={"code": "1000", "balance": "lots"})
        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid request")


class TestReadAccounts:

    def test_list_accounts(self, client):
        create_account(client, code="1000")
        create_account(client, code="2000", name="Payables", account_type="Liability")

        response = client.get("/accounts")
        assert response.status_code == 200
        assert [a["code"] for a in response.json()] == ["1000", "2000"]

    def test_list_active_accounts(self, client):
        cash = create_account(client, code="1000").json()
        create_account(client, code="1100", name="Bank")
        client.put(f"/accounts/{cash['id']}", json={"is_active": False})

        response = client.get("/accounts/active")
        assert [a["code"] for a in response.json()] == ["1100"]

    def test_get_by_code(self, client):
        create_account(client)
        response = client.get("/accounts/by-code/1000")
        assert response.status_code == 200
        assert response.json()["name"] == "Cash"

    def test_get_by_code_not_found(self, client):
        response = client.get("/accounts/by-code/9999")
        assert response.status_code == 404
        assert "message" in response.json()

    def test_get_not_found(self, client):
        response = client.get("/accounts/no-such-id")
        assert response.status_code == 404


class TestUpdateAccount:

    def test_update_name_and_type(self, client):
        created = create_account(client).json()

        response = client.put(f"/accounts/{created['id']}", json={
            "name": "Petty Cash", "account_type": "Expense",
        })
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Petty Cash"
        assert data["account_type"] == "Expense"
        assert data["code"] == "1000"

    def test_blank_fields_keep_values(self, client):
        created = create_account(client).json()

        response = client.put(f"/accounts/{created['id']}", json={
            "name": "  ", "account_type": "",
        })
        assert response.json()["name"] == "Cash"
        assert response.json()["account_type"] == "Asset"

    def test_update_with_type_field(self, client):
        created = create_account(client).json()
        response = client.put(f"/accounts/{created['id']}", json={"type": "Liability"})
        assert response.json()["account_type"] == "Liability"

    def test_update_invalid_type(self, client):
        created = create_account(client).json()
        response = client.put(f"/accounts/{created['id']}", json={"account_type": "Bogus"})
        assert response.status_code == 400

    def test_update_not_found(self, client):
        response = client.put("/accounts/missing", json={"name": "X"})
        assert response.status_code == 404


class TestDeleteAccount:

    def test_delete_account(self, client):
        created = create_account(client).json()

        response = client.delete(f"/accounts/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/accounts/{created['id']}").status_code == 404

    def test_delete_not_found(self, client):
        response = client.delete("/accounts/missing")
        assert response.status_code == 404


class TestSqlBackedCreate:

    @pytest.fixture
    def sql_client(self, sql_store):
        def override_get_store():
            yield sql_store

        app.dependency_overrides[get_store] = override_get_store
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_lost_duplicate_race_is_conflict(self, sql_client, sql_store, monkeypatch):
        assert create_account(sql_client).status_code == 201

        # Another request inserted the code after our duplicate check
        monkeypatch.setattr(sql_store.accounts, "get_by_code", lambda code: None)

        response = create_account(sql_client, name="Cash again")
        assert response.status_code == 409
        assert response.json() == {"message": "Account with code 1000 already exists"}

    def test_store_usable_after_conflict(self, sql_client, sql_store, monkeypatch):
        create_account(sql_client)
        monkeypatch.setattr(sql_store.accounts, "get_by_code", lambda code: None)
        create_account(sql_client, name="Cash again")
        monkeypatch.undo()

        response = sql_client.get("/accounts")
        assert response.status_code == 200
        assert [a["name"] for a in response.json()] == ["Cash"]
