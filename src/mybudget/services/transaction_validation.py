"""Business rules a transaction must satisfy before it is created."""

from decimal import Decimal
from typing import Optional, Union

SUBJECT_REQUIRED = "Transaction subject is required"
CATEGORY_REQUIRED = "Transaction category is required"
AMOUNT_NON_ZERO = "Transaction amount must be a non-zero value"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_for_creation(
    subject: Optional[str],
    category: Optional[str],
    amount: Optional[Union[Decimal, int, float]],
) -> Optional[str]:
    """
    Check a creation payload and return the first violated rule, if any.

    Rules are checked in order: subject, category, amount. Returns None
    when the payload is acceptable.
    """
    if _is_blank(subject):
        return SUBJECT_REQUIRED
    if _is_blank(category):
        return CATEGORY_REQUIRED
    if amount is None or amount == 0:
        return AMOUNT_NON_ZERO
    return None
