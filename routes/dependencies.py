"""
Shared repositories and services for the route handlers.
"""

from functools import lru_cache

from auth_service import AuthService
from repositories import TransactionRepository, UserRepository


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    return UserRepository()


@lru_cache(maxsize=1)
def get_transaction_repository() -> TransactionRepository:
    return TransactionRepository()


@lru_cache(maxsize=1)
def get_auth_service() -> AuthService:
    return AuthService(get_user_repository())


def reset_dependencies() -> None:
    """Forget cached repositories, e.g. after swapping the database engine."""
    get_user_repository.cache_clear()
    get_transaction_repository.cache_clear()
    get_auth_service.cache_clear()
