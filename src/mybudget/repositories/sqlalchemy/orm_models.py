"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, Integer, String, Text, Numeric

from mybudget.repositories.sqlalchemy.database import Base


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    bank = Column(String(255), nullable=True)
    client_id = Column(Integer, nullable=False, index=True)


class TransactionORM(Base):
    """SQLAlchemy model for Transaction."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    subject = Column(String(255), nullable=True)
    note = Column(Text, nullable=True)
    category = Column(String(255), nullable=True)
    amount = Column(Numeric(precision=18, scale=2), nullable=True)
    # Lookup key only; accounts may be deleted from under it.
    account_id = Column(Integer, nullable=True, index=True)
