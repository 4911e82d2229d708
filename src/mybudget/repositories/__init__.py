"""Repository layer - data access abstractions and implementations."""

from mybudget.repositories.protocols import (
    AccountRepository,
    TransactionRepository,
)

__all__ = [
    "AccountRepository",
    "TransactionRepository",
]
