"""
Database repositories.
"""

from .transaction_repository import TransactionRepository
from .user_repository import UserRepository

__all__ = ["TransactionRepository", "UserRepository"]
