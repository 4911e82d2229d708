"""Pydantic schemas for transaction endpoints."""

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field, PlainSerializer

from mybudget.api.schemas.base import CamelModel

# Amounts travel as JSON numbers. Stored with two decimal places.
JsonAmount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class TransactionCreateRequest(CamelModel):
    """
    Request schema for creating a transaction.

    Required fields are optional here on purpose: the service reports
    missing values with its own rule messages.
    """

    subject: Optional[str] = Field(default=None, max_length=255)
    category: Optional[str] = Field(default=None, max_length=255)
    amount: Optional[Decimal] = Field(default=None, decimal_places=2)
    account_id: Optional[int] = None
    note: Optional[str] = None


class TransactionUpdateRequest(CamelModel):
    """Request schema for overwriting a transaction (absent keys become null)."""

    subject: Optional[str] = Field(default=None, max_length=255)
    category: Optional[str] = Field(default=None, max_length=255)
    amount: Optional[Decimal] = Field(default=None, decimal_places=2)
    account_id: Optional[int] = None
    note: Optional[str] = None


class TransactionResponse(CamelModel):
    """Response schema for a single transaction."""

    id: int
    subject: Optional[str] = None
    note: Optional[str] = None
    category: Optional[str] = None
    amount: Optional[JsonAmount] = None
    account_id: Optional[int] = None
