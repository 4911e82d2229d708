"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from mybudget.config.settings import get_settings
from mybudget.core.security import TokenAuthority
from mybudget.repositories.sqlalchemy.database import get_db
from mybudget.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyTransactionRepository,
)
from mybudget.services import AccountService, ResourcePolicy, TransactionService


def get_account_repo(db: Session = Depends(get_db)) -> SqlAlchemyAccountRepository:
    """Provide AccountRepository instance."""
    return SqlAlchemyAccountRepository(db)


def get_transaction_repo(db: Session = Depends(get_db)) -> SqlAlchemyTransactionRepository:
    """Provide TransactionRepository instance."""
    return SqlAlchemyTransactionRepository(db)


def get_token_authority() -> TokenAuthority:
    """Provide TokenAuthority configured from settings."""
    settings = get_settings()
    return TokenAuthority(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        header_name=settings.auth_header_name,
        expire_minutes=settings.access_token_expire_minutes,
    )


def get_resource_policy() -> ResourcePolicy:
    """Provide the resource policy configured from settings."""
    settings = get_settings()
    return ResourcePolicy(
        enforce_owner_binding=settings.enforce_owner_binding,
        orphan_policy=settings.orphan_policy,
        validate_transaction_updates=settings.validate_transaction_updates,
    )


def get_account_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
    token_authority: TokenAuthority = Depends(get_token_authority),
    policy: ResourcePolicy = Depends(get_resource_policy),
) -> AccountService:
    """Provide AccountService instance."""
    return AccountService(
        account_repo=account_repo,
        transaction_repo=transaction_repo,
        token_authority=token_authority,
        policy=policy,
    )


def get_transaction_service(
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
    policy: ResourcePolicy = Depends(get_resource_policy),
) -> TransactionService:
    """Provide TransactionService instance."""
    return TransactionService(
        transaction_repo=transaction_repo,
        policy=policy,
    )
