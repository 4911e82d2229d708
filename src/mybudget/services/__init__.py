"""Service layer - business logic orchestration."""

from mybudget.services.policy import OrphanPolicy, ResourcePolicy
from mybudget.services.transaction_validation import validate_for_creation
from mybudget.services.account_service import AccountService, AccountCreate, AccountUpdate
from mybudget.services.transaction_service import (
    TransactionService,
    TransactionCreate,
    TransactionUpdate,
)

__all__ = [
    "OrphanPolicy",
    "ResourcePolicy",
    "validate_for_creation",
    "AccountService",
    "AccountCreate",
    "AccountUpdate",
    "TransactionService",
    "TransactionCreate",
    "TransactionUpdate",
]
