"""Transaction domain model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Transaction:
    """
    Single budget entry booked against an account.

    ``account_id`` is a plain lookup key. Deleting the account does not
    touch the transaction unless the configured orphan policy says so.
    Fields are optional because updates overwrite them verbatim.
    """

    subject: Optional[str]
    category: Optional[str]
    amount: Optional[Decimal]
    account_id: Optional[int]
    note: Optional[str] = None
    id: Optional[int] = None
