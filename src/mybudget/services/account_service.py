"""Account resource service."""

import logging
from dataclasses import dataclass
from typing import Optional

from mybudget.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from mybudget.core.security import TokenAuthority
from mybudget.domain.models import Account
from mybudget.repositories.protocols import AccountRepository, TransactionRepository
from mybudget.services.policy import OrphanPolicy, ResourcePolicy

logger = logging.getLogger(__name__)


@dataclass
class AccountCreate:
    """Input data for creating an account."""

    name: str
    bank: Optional[str]
    client_id: int


@dataclass
class AccountUpdate:
    """Replacement values for an account; every field is overwritten."""

    name: str
    bank: Optional[str]
    client_id: int


class AccountService:
    """
    Reads and writes accounts.

    The per-client listing is the only owner-scoped operation and the only
    one that consults the token authority.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        transaction_repo: TransactionRepository,
        token_authority: TokenAuthority,
        policy: Optional[ResourcePolicy] = None,
    ):
        self._account_repo = account_repo
        self._transaction_repo = transaction_repo
        self._token_authority = token_authority
        self._policy = policy or ResourcePolicy()

    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        return self._account_repo.list_all()

    def list_client_accounts(self, client_id: int, token: Optional[str]) -> list[Account]:
        """
        List the accounts of one client for a caller holding a valid token.

        Raises:
            UnauthorizedError: token missing or invalid, or (with owner
                binding on) issued to a different subject.
        """
        if not self._token_authority.is_valid(token):
            logger.warning("Rejected account listing for client %s: no valid token", client_id)
            raise UnauthorizedError()

        if self._policy.enforce_owner_binding:
            subject = self._token_authority.get_subject(token)
            if subject != str(client_id):
                logger.warning(
                    "Rejected account listing for client %s: token issued to %s",
                    client_id,
                    subject,
                )
                raise UnauthorizedError()

        return self._account_repo.list_by_client(client_id)

    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID, or None when it does not exist."""
        return self._account_repo.get_by_id(account_id)

    def create_account(self, data: AccountCreate) -> Account:
        """Create a new account."""
        account = self._account_repo.create(
            Account(name=data.name, bank=data.bank, client_id=data.client_id)
        )
        logger.info("Created account %s for client %s", account.id, account.client_id)
        return account

    def update_account(self, account_id: int, data: AccountUpdate) -> Optional[Account]:
        """Overwrite name, bank and owner. Returns None for an unknown id."""
        account = self._account_repo.get_by_id(account_id)
        if account is None:
            return None

        account.name = data.name
        account.bank = data.bank
        account.client_id = data.client_id
        return self._account_repo.update(account)

    def delete_account(self, account_id: int) -> None:
        """
        Delete an account, applying the configured orphan policy.

        Raises:
            NotFoundError: no account with this id.
            ConflictError: orphan policy is FORBID and transactions exist.
        """
        account = self._account_repo.get_by_id(account_id)
        if account is None:
            raise NotFoundError(f"Account not found with id: {account_id}")

        policy = self._policy.orphan_policy
        if policy == OrphanPolicy.FORBID:
            count = self._transaction_repo.count_by_account(account_id)
            if count > 0:
                raise ConflictError(
                    f"Account {account_id} still has {count} transaction(s)"
                )

        removed = self._account_repo.delete(
            account_id, cascade=policy == OrphanPolicy.CASCADE
        )
        if removed:
            logger.info("Removed %d transaction(s) of account %s", removed, account_id)
        logger.info("Deleted account %s", account_id)
