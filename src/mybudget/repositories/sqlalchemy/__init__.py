"""SQLAlchemy repository implementations."""

from mybudget.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from mybudget.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from mybudget.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyTransactionRepository",
]
