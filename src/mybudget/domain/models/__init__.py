"""Domain models package."""

from mybudget.domain.models.account import Account
from mybudget.domain.models.transaction import Transaction

__all__ = [
    "Account",
    "Transaction",
]
