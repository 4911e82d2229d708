"""Resource policies handed to the services at startup."""

from dataclasses import dataclass
from enum import Enum


class OrphanPolicy(str, Enum):
    """What happens to an account's transactions when the account is deleted."""

    IGNORE = "ignore"
    CASCADE = "cascade"
    FORBID = "forbid"


@dataclass(frozen=True)
class ResourcePolicy:
    """
    Behavior switches for the account and transaction services.

    Defaults:
    - any valid token opens any client's account list
    - deleting an account leaves its transactions in place
    - transaction updates skip the creation rules
    """

    enforce_owner_binding: bool = False
    orphan_policy: OrphanPolicy = OrphanPolicy.IGNORE
    validate_transaction_updates: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.orphan_policy, str):
            object.__setattr__(self, "orphan_policy", OrphanPolicy(self.orphan_policy))
