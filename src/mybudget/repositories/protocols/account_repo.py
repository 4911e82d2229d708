"""Account repository protocol."""

from typing import Protocol, Optional

from mybudget.domain.models import Account


class AccountRepository(Protocol):
    """Interface for account data access."""

    def create(self, account: Account) -> Account:
        """Persist a new account and return it with its generated id."""
        ...

    def get_by_id(self, account_id: int) -> Optional[Account]:
        """Retrieve account by ID."""
        ...

    def list_all(self) -> list[Account]:
        """List all accounts."""
        ...

    def list_by_client(self, client_id: int) -> list[Account]:
        """List the accounts owned by one client."""
        ...

    def update(self, account: Account) -> Optional[Account]:
        """Overwrite an existing account. None if it no longer exists."""
        ...

    def delete(self, account_id: int, cascade: bool = False) -> int:
        """
        Delete an account (hard delete).

        With cascade, its transactions are removed in the same unit of work.
        Returns the number of transactions removed.
        """
        ...
