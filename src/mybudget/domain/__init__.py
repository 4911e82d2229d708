"""Domain layer - pure business models with no external dependencies."""

from mybudget.domain.models import Account, Transaction

__all__ = [
    "Account",
    "Transaction",
]
