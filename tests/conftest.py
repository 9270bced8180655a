"""
Pytest configuration and fixtures for net worth tracker tests.

This module provides:
- In-memory SQLite database fixtures
- Factory helpers for accounts and transactions
- Plain Transaction builders for aggregator tests
- Time helpers for UTC
- Service and repository fixtures
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from networth.main import app
from networth.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from networth.repositories.sqlalchemy import orm_models  # noqa: F401
from networth.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyTransactionRepository,
    SqlAlchemyBudgetRepository,
    SqlAlchemyScheduleRepository,
)
from networth.services import (
    LedgerService,
    AnalysisService,
    BudgetService,
    ScheduleService,
    TransactionCreate,
)
from networth.domain.models import Account, Transaction
from networth.core.timezone import UTC
from networth.config.settings import Settings, set_settings, reset_settings


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in UTC."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Point the app at an in-memory database so startup never touches ~/.networth
    reset_database()
    set_settings(Settings(database_url="sqlite://"))

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    reset_database()
    reset_settings()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def account_repo(test_session) -> SqlAlchemyAccountRepository:
    """Provide test AccountRepository."""
    return SqlAlchemyAccountRepository(test_session)


@pytest.fixture
def transaction_repo(test_session) -> SqlAlchemyTransactionRepository:
    """Provide test TransactionRepository."""
    return SqlAlchemyTransactionRepository(test_session)


@pytest.fixture
def budget_repo(test_session) -> SqlAlchemyBudgetRepository:
    """Provide test BudgetRepository."""
    return SqlAlchemyBudgetRepository(test_session)


@pytest.fixture
def schedule_repo(test_session) -> SqlAlchemyScheduleRepository:
    """Provide test ScheduleRepository."""
    return SqlAlchemyScheduleRepository(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(account_repo, transaction_repo) -> LedgerService:
    """Provide test LedgerService."""
    return LedgerService(
        account_repo=account_repo,
        transaction_repo=transaction_repo,
    )


@pytest.fixture
def analysis_service(account_repo, transaction_repo) -> AnalysisService:
    """Provide test AnalysisService."""
    return AnalysisService(
        account_repo=account_repo,
        transaction_repo=transaction_repo,
    )


@pytest.fixture
def budget_service(budget_repo) -> BudgetService:
    """Provide test BudgetService."""
    return BudgetService(budget_repo=budget_repo)


@pytest.fixture
def schedule_service(schedule_repo, account_repo) -> ScheduleService:
    """Provide test ScheduleService."""
    return ScheduleService(schedule_repo=schedule_repo, account_repo=account_repo)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def account_factory(ledger_service) -> Callable[..., Account]:
    """Factory for creating test accounts."""

    def _create_account(
        name: Optional[str] = None,
        account_type: str = "bank",
        currency: str = "CAD",
    ) -> Account:
        if name is None:
            name = f"Test Account {uuid.uuid4().hex[:8]}"
        return ledger_service.create_account(
            name=name,
            account_type=account_type,
            currency=currency,
        )

    return _create_account


@pytest.fixture
def transaction_factory(ledger_service) -> Callable[..., Transaction]:
    """Factory for recording test transactions through the ledger."""

    def _create_transaction(
        account_id: str,
        amount: Decimal,
        transaction_date: Optional[datetime] = None,
        transaction_type: Optional[str] = None,
        ticker_symbol: Optional[str] = None,
        quantity: Optional[Decimal] = None,
        price_per_unit: Optional[Decimal] = None,
        category: Optional[str] = None,
        merchant: Optional[str] = None,
    ) -> Transaction:
        return ledger_service.add_transaction(TransactionCreate(
            account_id=account_id,
            amount=amount,
            transaction_date=transaction_date,
            transaction_type=transaction_type,
            ticker_symbol=ticker_symbol,
            quantity=quantity,
            price_per_unit=price_per_unit,
            category=category,
            merchant=merchant,
        ))

    return _create_transaction


# =============================================================================
# PRESET DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_account(account_factory) -> Account:
    """Create a sample chequing account."""
    return account_factory(name="Chequing")


@pytest.fixture
def investment_account(account_factory) -> Account:
    """Create a sample investment account."""
    return account_factory(name="Brokerage", account_type="investment")


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine) -> TestClient:
    """Provide FastAPI test client with test database."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def make_txn(
    amount,
    transaction_date=None,
    account_id: str = "acc-1",
    transaction_type: Optional[str] = None,
    ticker_symbol: Optional[str] = None,
    quantity=None,
    price_per_unit=None,
    category: Optional[str] = None,
    transaction_id: Optional[str] = None,
    merchant: Optional[str] = None,
) -> Transaction:
    """Build a plain Transaction value without touching the store."""
    return Transaction(
        transaction_id=transaction_id or uuid.uuid4().hex,
        account_id=account_id,
        transaction_date=transaction_date,
        amount=amount,
        transaction_type=transaction_type,
        ticker_symbol=ticker_symbol,
        quantity=quantity,
        price_per_unit=price_per_unit,
        category=category,
        merchant=merchant,
    )


def make_trade(
    transaction_type: str,
    symbol: str,
    quantity,
    price,
    transaction_date=None,
) -> Transaction:
    """Build a buy/sell Transaction whose amount mirrors the cash moved."""
    quantity = Decimal(str(quantity))
    price = Decimal(str(price))
    sign = Decimal("-1") if transaction_type == "buy" else Decimal("1")
    return make_txn(
        amount=sign * quantity * price,
        transaction_date=transaction_date,
        transaction_type=transaction_type,
        ticker_symbol=symbol,
        quantity=quantity,
        price_per_unit=price,
    )


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"
