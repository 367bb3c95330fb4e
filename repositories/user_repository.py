"""
User repository for database operations.
"""

from typing import Optional

from sqlmodel import select
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from exceptions import DuplicateEmailError
from id_generators import CounterIdGenerator, IdGenerator
from models import User
from sqlalchemy_db import DatabaseEngine


class UserRepository:
    """Repository class for user database operations."""

    def __init__(
        self,
        db_engine: Optional[DatabaseEngine] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        self.db_engine = db_engine or DatabaseEngine.instance()
        self.id_generator = id_generator or CounterIdGenerator(self._max_id() + 1)

    def _max_id(self) -> int:
        with self.db_engine.get_session() as session:
            return session.exec(select(func.max(User.id))).one() or 0

    def get(self, user_id: int) -> Optional[User]:
        with self.db_engine.get_session() as session:
            return session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        with self.db_engine.get_session() as session:
            return session.exec(select(User).where(User.email == email)).first()

    def create_user(self, name: str, email: str, password_hash: str) -> User:
        """
        Insert a new user.

        Args:
            name: Display name
            email: Normalized email address
            password_hash: bcrypt hash of the password

        Returns:
            The created User instance

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        user = User(
            id=self.id_generator.next_id(),
            name=name,
            email=email,
            password=password_hash,
        )

        with self.db_engine.get_session() as session:
            session.add(user)
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                raise DuplicateEmailError(email)
            session.refresh(user)
            return user
