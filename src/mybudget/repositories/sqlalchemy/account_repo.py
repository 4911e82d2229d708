"""SQLAlchemy implementation of AccountRepository."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mybudget.domain.models import Account
from mybudget.repositories.sqlalchemy.orm_models import AccountORM, TransactionORM


class SqlAlchemyAccountRepository:
    """SQLAlchemy-backed account repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        orm_account = AccountORM(
            name=account.name,
            bank=account.bank,
            client_id=account.client_id,
        )
        self._db.add(orm_account)
        self._db.commit()
        self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def get_by_id(self, account_id: int) -> Optional[Account]:
        """Retrieve account by ID."""
        orm_account = self._db.get(AccountORM, account_id)
        return self._to_domain(orm_account) if orm_account else None

    def list_all(self) -> list[Account]:
        """List all accounts."""
        orm_accounts = self._db.query(AccountORM).order_by(AccountORM.id).all()
        return [self._to_domain(a) for a in orm_accounts]

    def list_by_client(self, client_id: int) -> list[Account]:
        """List the accounts owned by one client."""
        orm_accounts = (
            self._db.query(AccountORM)
            .filter(AccountORM.client_id == client_id)
            .order_by(AccountORM.id)
            .all()
        )
        return [self._to_domain(a) for a in orm_accounts]

    def update(self, account: Account) -> Optional[Account]:
        """Overwrite name, bank and owner. Returns None if the row is gone."""
        orm_account = self._db.get(AccountORM, account.id)
        if orm_account is None:
            return None

        orm_account.name = account.name
        orm_account.bank = account.bank
        orm_account.client_id = account.client_id
        self._db.commit()
        self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def delete(self, account_id: int, cascade: bool = False) -> int:
        """
        Delete an account.

        With ``cascade`` the account's transactions go in the same commit.
        Nothing is written if any part fails.

        Returns:
            Number of transactions removed along with the account.
        """
        removed = 0
        try:
            if cascade:
                removed = self._db.query(TransactionORM).filter(
                    TransactionORM.account_id == account_id
                ).delete()
            self._db.query(AccountORM).filter(
                AccountORM.id == account_id
            ).delete()
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()
            raise
        return removed

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            id=orm.id,
            name=orm.name,
            bank=orm.bank,
            client_id=orm.client_id,
        )
