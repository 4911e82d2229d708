"""
Integration tests for SQLAlchemy repositories with SQLite.

Tests cover:
- Account repository CRUD, client filtering and cascading delete
- Transaction repository CRUD and account filtering
- Decimal amounts surviving a round trip
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from mybudget.domain.models import Account, Transaction
from mybudget.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyTransactionRepository,
)


def _txn(account_id: int, subject: str = "Rent", amount: str = "-900.00") -> Transaction:
    return Transaction(
        subject=subject,
        category="Housing",
        amount=Decimal(amount),
        account_id=account_id,
        note=None,
    )


# =============================================================================
# ACCOUNT REPOSITORY TESTS
# =============================================================================


class TestAccountRepository:
    """Tests for SqlAlchemyAccountRepository."""

    def test_create_generates_sequential_ids(self, account_repo: SqlAlchemyAccountRepository):
        """
        GIVEN an empty database
        WHEN two accounts are created
        THEN they receive ids 1 and 2
        """
        first = account_repo.create(Account(name="Main", bank="ACME", client_id=7))
        second = account_repo.create(Account(name="Savings", bank="ACME", client_id=7))

        assert first.id == 1
        assert second.id == 2

    def test_get_by_id(self, account_repo: SqlAlchemyAccountRepository):
        created = account_repo.create(Account(name="Main", bank=None, client_id=3))

        retrieved = account_repo.get_by_id(created.id)

        assert retrieved == Account(id=created.id, name="Main", bank=None, client_id=3)

    def test_get_missing_returns_none(self, account_repo: SqlAlchemyAccountRepository):
        assert account_repo.get_by_id(99) is None

    def test_list_by_client(self, account_repo: SqlAlchemyAccountRepository):
        account_repo.create(Account(name="A", bank="X", client_id=1))
        account_repo.create(Account(name="B", bank="X", client_id=2))
        account_repo.create(Account(name="C", bank="X", client_id=1))

        assert [a.name for a in account_repo.list_by_client(1)] == ["A", "C"]
        assert account_repo.list_by_client(3) == []

    def test_update_overwrites_fields(self, account_repo: SqlAlchemyAccountRepository):
        created = account_repo.create(Account(name="A", bank="X", client_id=1))
        created.name = "B"
        created.bank = "Y"
        created.client_id = 2

        account_repo.update(created)

        assert account_repo.get_by_id(created.id) == Account(id=created.id, name="B", bank="Y", client_id=2)

    def test_update_missing_returns_none(self, account_repo: SqlAlchemyAccountRepository):
        assert account_repo.update(Account(id=50, name="A", bank="X", client_id=1)) is None

    def test_delete(self, account_repo: SqlAlchemyAccountRepository):
        created = account_repo.create(Account(name="A", bank="X", client_id=1))

        removed = account_repo.delete(created.id)

        assert removed == 0
        assert account_repo.get_by_id(created.id) is None
        assert account_repo.list_all() == []

    def test_delete_leaves_transactions_without_cascade(
        self,
        account_repo: SqlAlchemyAccountRepository,
        transaction_repo: SqlAlchemyTransactionRepository,
    ):
        created = account_repo.create(Account(name="A", bank="X", client_id=1))
        transaction_repo.create(_txn(created.id))

        account_repo.delete(created.id)

        assert transaction_repo.count_by_account(created.id) == 1

    def test_delete_with_cascade(
        self,
        account_repo: SqlAlchemyAccountRepository,
        transaction_repo: SqlAlchemyTransactionRepository,
    ):
        """
        GIVEN an account with two transactions and a transaction on another account
        WHEN the account is deleted with cascade
        THEN only its own transactions go with it
        """
        created = account_repo.create(Account(name="A", bank="X", client_id=1))
        transaction_repo.create(_txn(created.id))
        transaction_repo.create(_txn(created.id))
        kept = transaction_repo.create(_txn(created.id + 1))

        removed = account_repo.delete(created.id, cascade=True)

        assert removed == 2
        assert account_repo.get_by_id(created.id) is None
        assert transaction_repo.list_by_account(created.id) == []
        assert transaction_repo.get_by_id(kept.id) is not None

    def test_failed_cascade_writes_nothing(
        self,
        account_repo: SqlAlchemyAccountRepository,
        transaction_repo: SqlAlchemyTransactionRepository,
        test_session,
        monkeypatch,
    ):
        """
        GIVEN an account with transactions
        WHEN the cascading delete fails to commit
        THEN the account and its transactions are both still there
        """
        created = account_repo.create(Account(name="A", bank="X", client_id=1))
        transaction_repo.create(_txn(created.id))
        transaction_repo.create(_txn(created.id))

        def _fail():
            raise OperationalError("DELETE", {}, Exception("disk I/O error"))

        monkeypatch.setattr(test_session, "commit", _fail)
        with pytest.raises(OperationalError):
            account_repo.delete(created.id, cascade=True)
        monkeypatch.undo()

        assert account_repo.get_by_id(created.id) is not None
        assert transaction_repo.count_by_account(created.id) == 2


# =============================================================================
# TRANSACTION REPOSITORY TESTS
# =============================================================================


class TestTransactionRepository:
    """Tests for SqlAlchemyTransactionRepository."""

    def test_create_and_get(self, transaction_repo: SqlAlchemyTransactionRepository):
        created = transaction_repo.create(_txn(1, amount="-900.55"))

        retrieved = transaction_repo.get_by_id(created.id)

        assert retrieved.id == created.id
        assert retrieved.amount == Decimal("-900.55")
        assert isinstance(retrieved.amount, Decimal)

    def test_list_and_count_by_account(self, transaction_repo: SqlAlchemyTransactionRepository):
        transaction_repo.create(_txn(1, "Rent"))
        transaction_repo.create(_txn(2, "Other"))
        transaction_repo.create(_txn(1, "Power"))

        assert [t.subject for t in transaction_repo.list_by_account(1)] == ["Rent", "Power"]
        assert transaction_repo.count_by_account(1) == 2
        assert transaction_repo.count_by_account(3) == 0

    def test_update_can_clear_fields(self, transaction_repo: SqlAlchemyTransactionRepository):
        created = transaction_repo.create(_txn(1))
        created.subject = None
        created.amount = None
        created.account_id = None

        updated = transaction_repo.update(created)

        assert updated.subject is None
        assert updated.amount is None
        assert updated.account_id is None

    def test_update_missing_returns_none(self, transaction_repo: SqlAlchemyTransactionRepository):
        missing = _txn(1)
        missing.id = 404

        assert transaction_repo.update(missing) is None
