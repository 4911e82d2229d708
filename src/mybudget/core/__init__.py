"""Core utilities and shared functionality."""

from mybudget.core.exceptions import (
    AppError,
    UnauthorizedError,
    ValidationError,
    NotFoundError,
    ConflictError,
    InternalFaultError,
)
from mybudget.core.security import TokenAuthority

__all__ = [
    "AppError",
    "UnauthorizedError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "InternalFaultError",
    "TokenAuthority",
]
