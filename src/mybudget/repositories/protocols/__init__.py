"""Repository protocol definitions (interfaces)."""

from mybudget.repositories.protocols.account_repo import AccountRepository
from mybudget.repositories.protocols.transaction_repo import TransactionRepository

__all__ = [
    "AccountRepository",
    "TransactionRepository",
]
