"""
Tests for the journal entry API endpoints.
"""

from decimal import Decimal


def entry_body(debit="1000", credit="1000", reference="JE-100", entry_date=None):
    body = {
        "description": "Owner investment",
        "reference_number": reference,
        "lines": [
            {"account_code": "1000", "debit_amount": debit, "narration": "Cash in"},
            {"account_code": "3000", "credit_amount": credit},
        ],
    }
    if entry_date is not None:
        body["entry_date"] = entry_date
    return body


def create_entry(client, **kwargs):
    return client.post("/journal-entries", json=entry_body(**kwargs))


class TestCreateEntry:

    def test_create_balanced_entry(self, client):
        response = create_entry(client)
        assert response.status_code == 201

        data = response.json()
        assert data["is_posted"] is False
        assert data["reference_number"] == "JE-100"
        assert [line["account_code"] for line in data["lines"]] == ["1000", "3000"]
        assert Decimal(data["lines"][0]["debit_amount"]) == Decimal("1000")
        assert data["lines"][0]["narration"] == "Cash in"
        assert response.headers["location"].endswith(f"/journal-entries/{data['id']}")

    def test_unbalanced_entry(self, client):
        response = create_entry(client, debit="1000", credit="500")
        assert response.status_code == 400
        message = response.json()["message"]
        assert message.startswith("Journal entry does not balance")
        assert "1000" in message and "500" in message

    def test_single_line_entry(self, client):
        body = entry_body()
        body["lines"] = body["lines"][:1]

        response = client.post("/journal-entries", json=body)
        assert response.status_code == 400
        assert "at least 2 lines" in response.json()["message"]

    def test_missing_description(self, client):
        body = entry_body()
        body["description"] = ""

        response = client.post("/journal-entries", json=body)
        assert response.status_code == 400

    def test_malformed_amount(self, client):
        response = create_entry(client, debit="abc")
        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid request")

    def test_amount_beyond_four_decimal_places(self, client):
        response = create_entry(client, debit="0.00001", credit="0.00001")
        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid request")
        assert client.get("/journal-entries").json() == []

    def test_four_decimal_places_accepted(self, client):
        response = create_entry(client, debit="0.0001", credit="0.0001")
        assert response.status_code == 201
        assert Decimal(response.json()["lines"][0]["debit_amount"]) == Decimal("0.0001")

    def test_rejected_entry_is_not_stored(self, client):
        create_entry(client, debit="1000", credit="500")
        assert client.get("/journal-entries").json() == []


class TestPostEntry:

    def test_post_then_post_again(self, client):
        entry = create_entry(client).json()

        first = client.post(f"/journal-entries/{entry['id']}/post")
        assert first.status_code == 204

        second = client.post(f"/journal-entries/{entry['id']}/post")
        assert second.status_code == 404
        assert "already posted" in second.json()["message"]

        assert client.get(f"/journal-entries/{entry['id']}").json()["is_posted"] is True

    def test_post_unknown(self, client):
        response = client.post("/journal-entries/missing/post")
        assert response.status_code == 404

    def test_posted_listing(self, client):
        posted = create_entry(client, reference="JE-1").json()
        create_entry(client, reference="JE-2")
        client.post(f"/journal-entries/{posted['id']}/post")

        response = client.get("/journal-entries/posted")
        assert [e["reference_number"] for e in response.json()] == ["JE-1"]


class TestUpdateAndDelete:

    def test_update_draft_description(self, client):
        entry = create_entry(client).json()

        response = client.put(
            f"/journal-entries/{entry['id']}", json={"description": "Corrected"}
        )
        assert response.status_code == 200
        assert response.json()["description"] == "Corrected"

    def test_update_posted_entry(self, client):
        entry = create_entry(client).json()
        client.post(f"/journal-entries/{entry['id']}/post")

        response = client.put(
            f"/journal-entries/{entry['id']}", json={"description": "Corrected"}
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Cannot update a posted journal entry"}

    def test_update_unknown(self, client):
        response = client.put("/journal-entries/missing", json={"description": "X"})
        assert response.status_code == 404

    def test_delete_draft(self, client):
        entry = create_entry(client).json()

        response = client.delete(f"/journal-entries/{entry['id']}")
        assert response.status_code == 204
        assert client.get(f"/journal-entries/{entry['id']}").status_code == 404

    def test_delete_posted_entry(self, client):
        entry = create_entry(client).json()
        client.post(f"/journal-entries/{entry['id']}/post")

        response = client.delete(f"/journal-entries/{entry['id']}")
        assert response.status_code == 400
        assert response.json() == {"message": "Cannot delete a posted journal entry"}

    def test_delete_unknown(self, client):
        response = client.delete("/journal-entries/missing")
        assert response.status_code == 404


class TestDateRange:

    def test_inclusive_range(self, client):
        create_entry(client, reference="JE-1", entry_date="2024-01-01T00:00:00")
        create_entry(client, reference="JE-2", entry_date="2024-01-31T00:00:00")
        create_entry(client, reference="JE-3", entry_date="2024-02-15T00:00:00")

        response = client.get("/journal-entries/by-date-range", params={
            "start_date": "2024-01-01T00:00:00",
            "end_date": "2024-01-31T00:00:00",
        })
        assert response.status_code == 200
        assert [e["reference_number"] for e in response.json()] == ["JE-1", "JE-2"]

    def test_start_after_end(self, client):
        response = client.get("/journal-entries/by-date-range", params={
            "start_date": "2024-02-01T00:00:00",
            "end_date": "2024-01-01T00:00:00",
        })
        assert response.status_code == 400
        assert response.json() == {
            "message": "Start date must be less than or equal to end date"
        }

    def test_missing_parameters(self, client):
        response = client.get("/journal-entries/by-date-range")
        assert response.status_code == 400
        assert response.json() == {
            "message": "Both start_date and end_date are required"
        }

    def test_camel_case_parameters(self, client):
        create_entry(client, reference="JE-1", entry_date="2024-01-10T00:00:00")
        create_entry(client, reference="JE-2", entry_date="2024-03-10T00:00:00")

        response = client.get("/journal-entries/by-date-range", params={
            "startDate": "2024-01-01T00:00:00",
            "endDate": "2024-01-31T00:00:00",
        })
        assert response.status_code == 200
        assert [e["reference_number"] for e in response.json()] == ["JE-1"]
