"""SQLAlchemy implementation of TransactionRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from mybudget.domain.models import Transaction
from mybudget.repositories.sqlalchemy.orm_models import TransactionORM


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed transaction repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        orm_txn = self._to_orm(transaction)
        self._db.add(orm_txn)
        self._db.commit()
        self._db.refresh(orm_txn)
        return self._to_domain(orm_txn)

    def get_by_id(self, txn_id: int) -> Optional[Transaction]:
        """Retrieve transaction by ID."""
        orm_txn = self._db.get(TransactionORM, txn_id)
        return self._to_domain(orm_txn) if orm_txn else None

    def list_by_account(self, account_id: int) -> list[Transaction]:
        """List all transactions for an account, ordered by id."""
        query = (
            self._db.query(TransactionORM)
            .filter(TransactionORM.account_id == account_id)
            .order_by(TransactionORM.id)
        )
        return [self._to_domain(t) for t in query.all()]

    def count_by_account(self, account_id: int) -> int:
        """Count transactions booked against an account id."""
        return (
            self._db.query(TransactionORM)
            .filter(TransactionORM.account_id == account_id)
            .count()
        )

    def update(self, transaction: Transaction) -> Optional[Transaction]:
        """Replace every mutable field. Returns None if the row is gone."""
        orm_txn = self._db.get(TransactionORM, transaction.id)
        if orm_txn is None:
            return None

        orm_txn.subject = transaction.subject
        orm_txn.note = transaction.note
        orm_txn.category = transaction.category
        orm_txn.amount = transaction.amount
        orm_txn.account_id = transaction.account_id

        self._db.commit()
        self._db.refresh(orm_txn)
        return self._to_domain(orm_txn)

    def delete(self, txn_id: int) -> None:
        """Delete a transaction."""
        self._db.query(TransactionORM).filter(
            TransactionORM.id == txn_id
        ).delete()
        self._db.commit()

    def _to_orm(self, txn: Transaction) -> TransactionORM:
        """Convert domain model to ORM model."""
        return TransactionORM(
            subject=txn.subject,
            note=txn.note,
            category=txn.category,
            amount=txn.amount,
            account_id=txn.account_id,
        )

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            id=orm.id,
            subject=orm.subject,
            note=orm.note,
            category=orm.category,
            amount=Decimal(str(orm.amount)) if orm.amount is not None else None,
            account_id=orm.account_id,
        )
