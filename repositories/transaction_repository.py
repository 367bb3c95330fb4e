"""
Transaction repository for database operations.
"""

from typing import List, Optional

from sqlmodel import select
from sqlalchemy import func

from id_generators import CounterIdGenerator, IdGenerator
from models import Transaction, TransactionCreate
from sqlalchemy_db import DatabaseEngine


class TransactionRepository:
    """Repository class for transaction database operations."""

    def __init__(
        self,
        db_engine: Optional[DatabaseEngine] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        """
        Initialize the transaction repository.

        Args:
            db_engine: Database engine, defaults to the process-wide engine
            id_generator: Source of transaction ids, defaults to a counter
                seeded past the highest stored id
        """
        self.db_engine = db_engine or DatabaseEngine.instance()
        self.id_generator = id_generator or CounterIdGenerator(self._max_id() + 1)

    def _max_id(self) -> int:
        with self.db_engine.get_session() as session:
            return session.exec(select(func.max(Transaction.id))).one() or 0

    def insert_transaction(self, user_id: int, data: TransactionCreate) -> Transaction:
        """
        Insert a new transaction into the database.

        Args:
            user_id: Owning user's id
            data: Validated transaction fields

        Returns:
            The created Transaction instance
        """
        transaction = Transaction(
            id=self.id_generator.next_id(),
            user_id=user_id,
            type=data.type.value,
            amount=data.amount,
            description=data.description,
            category=data.category,
            date=data.date,
        )

        with self.db_engine.get_session() as session:
            session.add(transaction)
            session.commit()
            session.refresh(transaction)
            return transaction

    def list_for_user(self, user_id: int) -> List[Transaction]:
        """Return a user's transactions, newest created first."""
        statement = (
            select(Transaction)
            .where(Transaction.user_id == user_id)
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
        )
        with self.db_engine.get_session() as session:
            return list(session.exec(statement).all())

    def delete_transaction(self, transaction_id: int, user_id: int) -> bool:
        """
        Delete a transaction if it belongs to the given user.

        Returns:
            True if a transaction was deleted
        """
        with self.db_engine.get_session() as session:
            transaction = session.get(Transaction, transaction_id)
            if transaction is None or transaction.user_id != user_id:
                return False
            session.delete(transaction)
            session.commit()
            return True
