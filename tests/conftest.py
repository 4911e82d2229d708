"""
Pytest configuration and fixtures for the budget backend tests.

This module provides:
- Isolated settings and an in-memory SQLite database per test
- Repository, token authority and service fixtures
- A FastAPI test client wired to the test database
- Factory helpers for accounts, transactions and auth headers
"""

from decimal import Decimal
from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session

from mybudget.main import app
from mybudget.api.deps import get_resource_policy, get_token_authority
from mybudget.config.settings import Settings, set_settings, reset_settings
from mybudget.core.security import TokenAuthority
from mybudget.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from mybudget.repositories.sqlalchemy import orm_models  # noqa: F401
from mybudget.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyTransactionRepository,
)
from mybudget.services import (
    AccountService,
    AccountCreate,
    ResourcePolicy,
    TransactionService,
    TransactionCreate,
)
from mybudget.domain.models import Account, Transaction

TEST_SECRET = "test-signing-secret"


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture(autouse=True)
def test_settings() -> Settings:
    """Install settings that point at an in-memory database."""
    settings = Settings(
        _env_file=None,
        database_url="sqlite:///:memory:",
        jwt_secret=TEST_SECRET,
    )
    set_settings(settings)
    reset_database()
    yield settings
    reset_database()
    reset_settings()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


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


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def policy() -> ResourcePolicy:
    """Default resource policy. Override in a test class to change behavior."""
    return ResourcePolicy()


@pytest.fixture
def token_authority() -> TokenAuthority:
    """Token authority signing with the test secret."""
    return TokenAuthority(secret=TEST_SECRET)


@pytest.fixture
def account_service(account_repo, transaction_repo, token_authority, policy) -> AccountService:
    """Provide test AccountService."""
    return AccountService(
        account_repo=account_repo,
        transaction_repo=transaction_repo,
        token_authority=token_authority,
        policy=policy,
    )


@pytest.fixture
def transaction_service(transaction_repo, policy) -> TransactionService:
    """Provide test TransactionService."""
    return TransactionService(
        transaction_repo=transaction_repo,
        policy=policy,
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def account_factory(account_service) -> Callable[..., Account]:
    """Factory for creating test accounts."""

    def _create_account(
        name: str = "Main",
        bank: Optional[str] = "ACME",
        client_id: int = 7,
    ) -> Account:
        return account_service.create_account(
            AccountCreate(name=name, bank=bank, client_id=client_id)
        )

    return _create_account


@pytest.fixture
def transaction_factory(transaction_service) -> Callable[..., Transaction]:
    """Factory for creating test transactions."""

    def _create_transaction(
        account_id: int,
        subject: str = "Rent",
        category: str = "Housing",
        amount: Decimal = Decimal("-900"),
        note: Optional[str] = None,
    ) -> Transaction:
        return transaction_service.create_transaction(
            TransactionCreate(
                subject=subject,
                category=category,
                amount=amount,
                account_id=account_id,
                note=note,
            )
        )

    return _create_transaction


@pytest.fixture
def auth_headers(token_authority) -> Callable[[int], dict[str, str]]:
    """Build an Authorization header carrying a fresh token for a client id."""

    def _headers(client_id: int) -> dict[str, str]:
        token = token_authority.create_token(str(client_id))
        return {"Authorization": f"Bearer {token}"}

    return _headers


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, token_authority, policy) -> TestClient:
    """Provide FastAPI test client with test database."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_authority] = lambda: token_authority
    app.dependency_overrides[get_resource_policy] = lambda: policy
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
