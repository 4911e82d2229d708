"""Transaction repository protocol."""

from typing import Protocol, Optional

from mybudget.domain.models import Transaction


class TransactionRepository(Protocol):
    """Interface for transaction data access."""

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction and return it with its generated id."""
        ...

    def get_by_id(self, txn_id: int) -> Optional[Transaction]:
        """Retrieve transaction by ID."""
        ...

    def list_by_account(self, account_id: int) -> list[Transaction]:
        """List all transactions booked against an account id."""
        ...

    def count_by_account(self, account_id: int) -> int:
        """Count transactions booked against an account id."""
        ...

    def update(self, transaction: Transaction) -> Optional[Transaction]:
        """Overwrite an existing transaction. None if it no longer exists."""
        ...

    def delete(self, txn_id: int) -> None:
        """Delete a transaction."""
        ...
