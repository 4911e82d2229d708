"""Pydantic schemas for account endpoints."""

from typing import Optional

from pydantic import Field

from mybudget.api.schemas.base import CamelModel


class AccountCreate(CamelModel):
    """Request schema for creating an account."""

    name: str = Field(..., min_length=1, max_length=255, description="Display label")
    bank: Optional[str] = Field(default=None, max_length=255, description="Issuing bank")
    client_id: int = Field(..., description="Owning client")


class AccountUpdate(CamelModel):
    """Request schema for overwriting an account. Unknown keys are ignored."""

    name: str = Field(..., min_length=1, max_length=255)
    bank: Optional[str] = Field(default=None, max_length=255)
    client_id: int


class AccountResponse(CamelModel):
    """Response schema for a single account."""

    id: int
    name: str
    bank: Optional[str] = None
    client_id: int
