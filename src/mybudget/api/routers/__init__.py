"""API routers package."""

from mybudget.api.routers.accounts import router as accounts_router
from mybudget.api.routers.transactions import router as transactions_router

__all__ = [
    "accounts_router",
    "transactions_router",
]
