"""Pydantic schemas for API request/response."""

from mybudget.api.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
)
from mybudget.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionResponse,
)

__all__ = [
    "AccountCreate",
    "AccountUpdate",
    "AccountResponse",
    "TransactionCreateRequest",
    "TransactionUpdateRequest",
    "TransactionResponse",
]
