"""Account domain model."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Account:
    """
    Bank account held by a client.

    ``id`` is assigned by storage on first save and never changes.
    ``client_id`` names the single owner; an update may hand the
    account to another client.
    """

    name: str
    bank: Optional[str]
    client_id: int
    id: Optional[int] = None
