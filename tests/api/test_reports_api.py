"""
Tests for the report API endpoints.
"""

from decimal import Decimal


def post_balanced_entry(client, amount="1000"):
    entry = client.post("/journal-entries", json={
        "description": "Owner investment",
        "reference_number": "JE-1",
        "lines": [
            {"account_code": "1000", "debit_amount": amount},
            {"account_code": "3000", "credit_amount": amount},
        ],
    }).json()
    client.post(f"/journal-entries/{entry['id']}/post")
    return entry


class TestTrialBalance:

    def test_empty_store(self, client):
        response = client.get("/reports/trial-balance")
        assert response.status_code == 200

        data = response.json()
        assert data["accounts"] == []
        assert Decimal(data["total_debits"]) == 0
        assert data["is_balanced"] is True

    def test_posted_entry_reflected(self, client):
        client.post("/accounts", json={
            "code": "1000", "name": "Cash", "account_type": "Asset",
        })
        client.post("/accounts", json={
            "code": "3000", "name": "Common Stock", "account_type": "Equity",
        })
        post_balanced_entry(client)

        data = client.get("/reports/trial-balance").json()
        rows = {row["account_code"]: row for row in data["accounts"]}

        assert Decimal(rows["1000"]["debit"]) == Decimal("1000")
        assert Decimal(rows["1000"]["credit"]) == 0
        assert Decimal(rows["3000"]["credit"]) == Decimal("1000")
        assert rows["3000"]["account_name"] == "Common Stock"
        assert Decimal(data["total_debits"]) == Decimal("1000")
        assert Decimal(data["total_credits"]) == Decimal("1000")
        assert data["is_balanced"] is True

    def test_draft_entries_ignored(self, client):
        client.post("/journal-entries", json={
            "description": "Draft",
            "reference_number": "JE-9",
            "lines": [
                {"account_code": "1000", "debit_amount": "75"},
                {"account_code": "3000", "credit_amount": "75"},
            ],
        })

        data = client.get("/reports/trial-balance").json()
        assert data["accounts"] == []


class TestTotals:

    def test_totals(self, client):
        post_balanced_entry(client, amount="1000")
        post_balanced_entry(client, amount="250.25")

        debits = client.get("/reports/total-debits")
        credits = client.get("/reports/total-credits")

        assert debits.status_code == 200
        assert Decimal(debits.json()["total"]) == Decimal("1250.25")
        assert Decimal(credits.json()["total"]) == Decimal("1250.25")

    def test_totals_when_nothing_posted(self, client):
        assert Decimal(client.get("/reports/total-debits").json()["total"]) == 0
