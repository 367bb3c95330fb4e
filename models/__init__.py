"""
SQLModel and pydantic models for the finance tracker.
"""

from .transaction_model import Transaction, TransactionCreate, TransactionRecord
from .user_model import User, UserCreate, UserLogin, UserRecord

__all__ = [
    "Transaction",
    "TransactionCreate",
    "TransactionRecord",
    "User",
    "UserCreate",
    "UserLogin",
    "UserRecord",
]
