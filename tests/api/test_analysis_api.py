"""
API tests for analysis endpoints.

Tests cover:
- Balance, net worth (per transaction and per month)
- Holdings and performance of an investment account
- Spending and cash flow
- Store failures mapped to 503
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from networth.main import app
from networth.api.deps import get_analysis_service
from networth.services import AnalysisService


def _account(client: TestClient, name: str, account_type: str = "bank") -> str:
    response = client.post("/accounts/", json={"name": name, "account_type": account_type})
    assert response.status_code == 201
    return response.json()["account_id"]


def _txn(client: TestClient, account_id: str, amount: str, date: str, **extra) -> None:
    response = client.post("/transactions/", json={
        "account_id": account_id,
        "amount": amount,
        "transaction_date": date,
        **extra,
    })
    assert response.status_code == 201


@pytest.fixture
def household(client: TestClient) -> dict:
    """Chequing, credit card and brokerage accounts with a few transactions."""
    chequing = _account(client, "Chequing")
    visa = _account(client, "Visa", "credit")
    tfsa = _account(client, "TFSA", "investment")

    _txn(client, chequing, "4000", "2024-01-05T00:00:00Z", category="Salary")
    _txn(client, chequing, "-1500", "2024-01-06T00:00:00Z", category="Rent")
    _txn(client, visa, "-200", "2024-01-03T00:00:00Z", category="Groceries")
    _txn(client, visa, "-50", "2024-02-10T00:00:00Z")

    _txn(client, tfsa, "1000", "2024-01-02T00:00:00Z", transaction_type="contribution")
    _txn(client, tfsa, "-500", "2024-01-04T00:00:00Z", transaction_type="buy",
         ticker_symbol="VFV", quantity="5", price_per_unit="100")
    _txn(client, tfsa, "-300", "2024-01-08T00:00:00Z", transaction_type="buy",
         ticker_symbol="VFV", quantity="2", price_per_unit="150")

    return {"chequing": chequing, "visa": visa, "tfsa": tfsa}


# =============================================================================
# BALANCE / NET WORTH TESTS
# =============================================================================


class TestBalanceAndNetWorthAPI:
    """Tests for /analysis/balance and /analysis/net-worth."""

    def test_balance(self, client: TestClient, household: dict):
        """
        GIVEN a chequing account with salary and rent
        WHEN I GET /analysis/balance
        THEN balance is 2500 with two history points
        """
        response = client.get("/analysis/balance", params={"account_id": household["chequing"]})

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["balance"]) == Decimal("2500")
        assert [Decimal(p["balance"]) for p in data["points"]] == [Decimal("4000"), Decimal("2500")]

    def test_balance_unknown_account_returns_404(self, client: TestClient):
        """
        GIVEN no accounts
        WHEN I GET /analysis/balance for an unknown account
        THEN response is 404
        """
        response = client.get("/analysis/balance", params={"account_id": "missing"})

        assert response.status_code == 404

    def test_net_worth_selected_accounts(self, client: TestClient, household: dict):
        """
        GIVEN chequing and visa accounts
        WHEN I GET /analysis/net-worth for both
        THEN points interleave by date and end at the combined balance
        """
        response = client.get("/analysis/net-worth", params={
            "account_ids": f"{household['chequing']},{household['visa']}",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["granularity"] == "transaction"
        values = [Decimal(p["net_worth"]) for p in data["points"]]
        assert values == [Decimal("-200"), Decimal("3800"), Decimal("2300"), Decimal("2250")]

    def test_net_worth_monthly(self, client: TestClient, household: dict):
        """
        GIVEN transactions across all accounts
        WHEN I GET /analysis/net-worth?granularity=month
        THEN the first two months hold the month-end totals
        """
        response = client.get("/analysis/net-worth", params={"granularity": "month"})

        assert response.status_code == 200
        points = response.json()["points"]
        assert points[0]["date"].startswith("2024-01-01")
        assert Decimal(points[0]["net_worth"]) == Decimal("2500")
        assert Decimal(points[1]["net_worth"]) == Decimal("2450")
        assert Decimal(points[-1]["net_worth"]) == Decimal("2450")

    def test_invalid_time_range_returns_422(self, client: TestClient):
        """
        GIVEN an unknown time range
        WHEN I GET /analysis/net-worth
        THEN response is 422
        """
        response = client.get("/analysis/net-worth", params={"time_range": "5Y"})

        assert response.status_code == 422


# =============================================================================
# INVESTMENT TESTS
# =============================================================================


class TestInvestmentAPI:
    """Tests for /analysis/holdings and /analysis/performance."""

    def test_holdings(self, client: TestClient, household: dict):
        """
        GIVEN buys of 5 VFV @ 100 and 2 VFV @ 150
        WHEN I GET /analysis/holdings
        THEN VFV is held at 7 units, cost 800, valued at 1050
        """
        response = client.get("/analysis/holdings", params={"account_id": household["tfsa"]})

        assert response.status_code == 200
        data = response.json()
        vfv = data["holdings"][0]
        assert vfv["symbol"] == "VFV"
        assert Decimal(vfv["quantity"]) == Decimal("7")
        assert Decimal(vfv["total_cost"]) == Decimal("800")
        assert Decimal(vfv["total_value"]) == Decimal("1050")
        assert Decimal(data["total_value"]) == Decimal("1050")

    def test_performance(self, client: TestClient, household: dict):
        """
        GIVEN a contribution of 1000 and 800 spent on buys
        WHEN I GET /analysis/performance
        THEN net contributions are 1000 and current balance is 200
        """
        response = client.get("/analysis/performance", params={"account_id": household["tfsa"]})

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["net_contributions"]) == Decimal("1000")
        assert Decimal(data["current_balance"]) == Decimal("200")
        assert Decimal(data["total_gain"]) == Decimal("-800")


# =============================================================================
# SPENDING / CASH FLOW TESTS
# =============================================================================


class TestSpendingAndCashFlowAPI:
    """Tests for /analysis/spending and /analysis/cash-flow."""

    def test_spending_all_time(self, client: TestClient, household: dict):
        """
        GIVEN rent, groceries, an uncategorized charge and investment buys
        WHEN I GET /analysis/spending?time_range=ALL
        THEN categories are ranked by absolute outflow
        """
        response = client.get("/analysis/spending", params={
            "account_ids": f"{household['chequing']},{household['visa']}",
            "time_range": "ALL",
        })

        assert response.status_code == 200
        data = response.json()
        assert [c["category"] for c in data["categories"]] == ["Rent", "Groceries", "Uncategorized"]
        assert Decimal(data["total"]) == Decimal("1750")

    def test_spending_without_account_ids_excludes_brokerage(self, client: TestClient, household: dict):
        """
        GIVEN bank and credit spending plus 800 of VFV buys on a brokerage
        WHEN I GET /analysis/spending without account_ids
        THEN the buys are not reported and the totals match the bank-side accounts
        """
        response = client.get("/analysis/spending", params={"time_range": "ALL"})

        assert response.status_code == 200
        data = response.json()
        assert [c["category"] for c in data["categories"]] == ["Rent", "Groceries", "Uncategorized"]
        assert [Decimal(c["total_amount"]) for c in data["categories"]] == [
            Decimal("1500"), Decimal("200"), Decimal("50"),
        ]
        assert Decimal(data["total"]) == Decimal("1750")

    def test_cash_flow(self, client: TestClient, household: dict):
        """
        GIVEN chequing and visa activity in January and February
        WHEN I GET /analysis/cash-flow
        THEN each month reports income and spending
        """
        response = client.get("/analysis/cash-flow", params={
            "account_ids": f"{household['chequing']},{household['visa']}",
        })

        assert response.status_code == 200
        months = response.json()["months"]
        assert [m["month"] for m in months] == ["2024-01", "2024-02"]
        assert Decimal(months[0]["income"]) == Decimal("4000")
        assert Decimal(months[0]["spending"]) == Decimal("1700")
        assert Decimal(months[1]["spending"]) == Decimal("50")


# =============================================================================
# STORE FAILURE TESTS
# =============================================================================


class _BrokenAccountRepository:
    def get_by_id(self, account_id: str):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    def list_all(self):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))


class TestStoreFailureAPI:
    """Tests for store failures surfacing as 503."""

    def test_store_failure_returns_503(self, client: TestClient):
        """
        GIVEN a store that fails on every read
        WHEN I GET /analysis/net-worth
        THEN response is 503 with a readable message
        """
        app.dependency_overrides[get_analysis_service] = lambda: AnalysisService(
            account_repo=_BrokenAccountRepository(),
            transaction_repo=None,
        )

        response = client.get("/analysis/net-worth")

        assert response.status_code == 503
        data = response.json()
        assert data["error"] == "STORE_UNAVAILABLE"
        assert "disk I/O error" in data["message"]
