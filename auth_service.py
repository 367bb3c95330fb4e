"""
Registration and password login backed by bcrypt hashes.
"""

from typing import Optional

import bcrypt
import structlog

from exceptions import AuthenticationError, DuplicateEmailError
from models import User, UserCreate, UserLogin
from repositories import UserRepository

logger = structlog.get_logger(__name__)

# Hash checked when the email is unknown, so both failure paths cost one bcrypt round
_DUMMY_HASH = bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt()).decode("utf-8")


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class AuthService:
    """Creates users and checks their credentials."""

    def __init__(self, user_repository: Optional[UserRepository] = None):
        self.user_repository = user_repository or UserRepository()

    def register_user(self, data: UserCreate) -> User:
        """
        Register a new user.

        Args:
            data: Validated registration payload

        Returns:
            The created user

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        if self.user_repository.get_by_email(data.email) is not None:
            logger.info("registration_rejected", reason="duplicate_email")
            raise DuplicateEmailError(data.email)

        user = self.user_repository.create_user(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
        )
        logger.info("user_registered", user_id=user.id)
        return user

    def authenticate_user(self, data: UserLogin) -> User:
        """
        Check an email/password pair.

        Returns:
            The matching user

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        user = self.user_repository.get_by_email(data.email)
        if user is None:
            verify_password(data.password, _DUMMY_HASH)
            raise AuthenticationError("Invalid email or password")
        if not verify_password(data.password, user.password):
            logger.info("login_rejected", user_id=user.id)
            raise AuthenticationError("Invalid email or password")

        logger.info("user_logged_in", user_id=user.id)
        return user
