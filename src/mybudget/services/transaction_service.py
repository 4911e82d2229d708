"""Transaction resource service."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from mybudget.core.exceptions import InternalFaultError, NotFoundError, ValidationError
from mybudget.domain.models import Transaction
from mybudget.repositories.protocols import TransactionRepository
from mybudget.services.policy import ResourcePolicy
from mybudget.services.transaction_validation import validate_for_creation

logger = logging.getLogger(__name__)


@dataclass
class TransactionCreate:
    """Input data for creating a transaction."""

    subject: Optional[str]
    category: Optional[str]
    amount: Optional[Decimal]
    account_id: Optional[int]
    note: Optional[str] = None


@dataclass
class TransactionUpdate:
    """Replacement values for a transaction; every field is overwritten."""

    subject: Optional[str] = None
    category: Optional[str] = None
    amount: Optional[Decimal] = None
    account_id: Optional[int] = None
    note: Optional[str] = None


def _missing(txn_id: int) -> NotFoundError:
    return NotFoundError(f"No Transaction with id {txn_id}")


class TransactionService:
    """
    Reads and writes transactions.

    Storage faults on the read and edit paths surface as InternalFaultError;
    create and delete let them propagate.
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        policy: Optional[ResourcePolicy] = None,
    ):
        self._transaction_repo = transaction_repo
        self._policy = policy or ResourcePolicy()

    def list_by_account(self, account_id: int) -> list[Transaction]:
        """List the transactions booked against an account id."""
        try:
            return self._transaction_repo.list_by_account(account_id)
        except SQLAlchemyError:
            logger.exception("Listing transactions of account %s failed", account_id)
            raise InternalFaultError("Server failed (transactions by accountId fetch)")

    def get_transaction(self, txn_id: int) -> Transaction:
        """Get transaction by ID."""
        try:
            transaction = self._transaction_repo.get_by_id(txn_id)
        except SQLAlchemyError:
            logger.exception("Fetching transaction %s failed", txn_id)
            raise InternalFaultError("Server failed (transaction fetch)")
        if transaction is None:
            raise _missing(txn_id)
        return transaction

    def create_transaction(self, data: TransactionCreate) -> Transaction:
        """
        Validate and persist a new transaction.

        The account id is stored as given; no account lookup is made.
        """
        error = validate_for_creation(data.subject, data.category, data.amount)
        if error is not None:
            raise ValidationError(error)

        created = self._transaction_repo.create(
            Transaction(
                subject=data.subject,
                note=data.note,
                category=data.category,
                amount=data.amount,
                account_id=data.account_id,
            )
        )
        logger.info("Created transaction %s on account %s", created.id, created.account_id)
        return created

    def update_transaction(self, txn_id: int, data: TransactionUpdate) -> Transaction:
        """
        Overwrite subject, note, category, amount and account id.

        An unknown id is reported before any rule check. Creation rules
        apply only when the policy asks for it.
        """
        try:
            transaction = self._transaction_repo.get_by_id(txn_id)
        except SQLAlchemyError:
            logger.exception("Loading transaction %s for edit failed", txn_id)
            raise InternalFaultError("Server failed (transaction edit)")
        if transaction is None:
            raise _missing(txn_id)

        if self._policy.validate_transaction_updates:
            error = validate_for_creation(data.subject, data.category, data.amount)
            if error is not None:
                raise ValidationError(error)

        transaction.subject = data.subject
        transaction.note = data.note
        transaction.category = data.category
        transaction.amount = data.amount
        transaction.account_id = data.account_id
        try:
            updated = self._transaction_repo.update(transaction)
        except SQLAlchemyError:
            logger.exception("Updating transaction %s failed", txn_id)
            raise InternalFaultError("Server failed (transaction edit)")
        if updated is None:
            raise _missing(txn_id)
        return updated

    def delete_transaction(self, txn_id: int) -> None:
        """Delete a transaction."""
        transaction = self._transaction_repo.get_by_id(txn_id)
        if transaction is None:
            raise NotFoundError(f"Transaction not found with id: {txn_id}")
        self._transaction_repo.delete(txn_id)
        logger.info("Deleted transaction %s", txn_id)
