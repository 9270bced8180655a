"""
API tests for recurring schedule endpoints.

Tests cover:
- Schedule CRUD with next occurrence in responses
- Listing by account and active state
- Ending a schedule and listing due schedules
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def account_id(client: TestClient) -> str:
    response = client.post("/accounts/", json={"name": "Chequing"})
    assert response.status_code == 201
    return response.json()["account_id"]


def _schedule(client: TestClient, account_id: str, **overrides) -> dict:
    payload = {
        "account_id": account_id,
        "frequency": "monthly",
        "start_date": "2024-01-31",
        "amount": "-1500",
        "category": "Rent",
    }
    payload.update(overrides)
    response = client.post("/schedules/", json=payload)
    assert response.status_code == 201
    return response.json()


def _today() -> date:
    return datetime.now(timezone.utc).date()


class TestScheduleCrudAPI:
    """Tests for /schedules CRUD."""

    def test_create_reports_next_occurrence(self, client: TestClient, account_id: str):
        """
        GIVEN a bank account
        WHEN I POST a daily schedule that started last week
        THEN it is active and next occurs today
        """
        start = (_today() - timedelta(days=7)).isoformat()

        data = _schedule(client, account_id, frequency="daily", start_date=start)

        assert data["is_active"] is True
        assert data["next_occurrence"] == _today().isoformat()
        assert data["frequency"] == "daily"

    def test_unknown_account_returns_404(self, client: TestClient):
        """
        GIVEN no accounts
        WHEN I POST a schedule for an unknown account
        THEN response is 404
        """
        response = client.post("/schedules/", json={
            "account_id": "missing", "frequency": "weekly", "start_date": "2024-01-01", "amount": "-10",
        })

        assert response.status_code == 404

    def test_end_before_start_returns_400(self, client: TestClient, account_id: str):
        """
        GIVEN an end date before the start date
        WHEN I POST the schedule
        THEN response is 400
        """
        response = client.post("/schedules/", json={
            "account_id": account_id, "frequency": "weekly",
            "start_date": "2024-02-01", "end_date": "2024-01-01", "amount": "-10",
        })

        assert response.status_code == 400

    def test_patch_null_clears_category(self, client: TestClient, account_id: str):
        """
        GIVEN a rent schedule
        WHEN I PATCH category to null
        THEN the category is cleared and the amount kept
        """
        created = _schedule(client, account_id)

        response = client.patch(f"/schedules/{created['schedule_id']}", json={"category": None})

        assert response.status_code == 200
        assert response.json()["category"] is None
        assert response.json()["amount"] == created["amount"]

    def test_delete(self, client: TestClient, account_id: str):
        """
        GIVEN a schedule
        WHEN I DELETE it
        THEN it can no longer be fetched
        """
        created = _schedule(client, account_id)

        assert client.delete(f"/schedules/{created['schedule_id']}").status_code == 204
        assert client.get(f"/schedules/{created['schedule_id']}").status_code == 404


class TestScheduleLifecycleAPI:
    """Tests for listing, ending and due schedules."""

    def test_end_keeps_schedule_through_today(self, client: TestClient, account_id: str):
        """
        GIVEN an open-ended schedule started last year
        WHEN I POST /schedules/{id}/end
        THEN it ends today and still counts as active for today
        """
        start = date(_today().year - 1, 1, 1).isoformat()
        created = _schedule(client, account_id, start_date=start)

        response = client.post(f"/schedules/{created['schedule_id']}/end")

        assert response.status_code == 200
        assert response.json()["end_date"] == _today().isoformat()
        listed = client.get("/schedules/", params={"account_id": account_id, "active": "true"})
        assert listed.json()["count"] == 1

    def test_due_on_day(self, client: TestClient, account_id: str):
        """
        GIVEN a weekly schedule starting 2024-06-07 and a monthly one on the 1st
        WHEN I GET /schedules/due?on=2024-06-14
        THEN only the weekly schedule is listed
        """
        _schedule(client, account_id, frequency="weekly", start_date="2024-06-07", category="Salary", amount="2000")
        _schedule(client, account_id, start_date="2024-01-01")

        response = client.get("/schedules/due", params={"on": "2024-06-14"})

        assert response.status_code == 200
        data = response.json()
        assert [s["category"] for s in data["schedules"]] == ["Salary"]
        assert data["schedules"][0]["next_occurrence"] == "2024-06-14"

    def test_list_unknown_account_returns_404(self, client: TestClient):
        """
        GIVEN no accounts
        WHEN I list schedules of an unknown account
        THEN response is 404
        """
        assert client.get("/schedules/", params={"account_id": "missing"}).status_code == 404
