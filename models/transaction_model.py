"""
SQLModel and pydantic models for financial transactions.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

from constants import TransactionType
from utils import normalize_amount, validate_iso_date


class Transaction(SQLModel, table=True):
    """SQLModel model for financial transactions."""

    __tablename__ = "transactions"

    # Primary key, assigned by the repository's id generator
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(index=True, foreign_key="users.id")

    # Transaction details
    type: str = Field(description="Transaction type: 'expense' or 'income'")
    amount: str = Field(description="Exact decimal string with two places")
    description: str
    category: str
    date: str = Field(index=True, description="Calendar date, YYYY-MM-DD")

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.now)

    def __repr__(self) -> str:
        """String representation of Transaction."""
        return (
            f"<Transaction(id={self.id}, user_id={self.user_id}, type='{self.type}', "
            f"amount='{self.amount}', description='{self.description}')>"
        )


def _required_text(value: str, label: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{label} is required")
    return value


class TransactionCreate(BaseModel):
    """
    Fields a user supplies for a new transaction.

    The amount is accepted as a number or a string and normalized to a
    two-place decimal string.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: TransactionType
    amount: str
    description: str
    category: str
    date: str

    @field_validator("amount", mode="before")
    @classmethod
    def amount_positive(cls, value) -> str:
        return normalize_amount(value)

    @field_validator("description")
    @classmethod
    def description_required(cls, value: str) -> str:
        return _required_text(value, "Description")

    @field_validator("category")
    @classmethod
    def category_required(cls, value: str) -> str:
        return _required_text(value, "Category")

    @field_validator("date")
    @classmethod
    def date_iso(cls, value: str) -> str:
        return validate_iso_date(value)


class TransactionRecord(BaseModel):
    """A stored transaction, as returned by the API and kept in the local ledger."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    user_id: int
    type: TransactionType
    amount: str
    description: str
    category: str
    date: str
    created_at: datetime

    @field_validator("amount", mode="before")
    @classmethod
    def amount_positive(cls, value) -> str:
        return normalize_amount(value)

    @field_validator("date")
    @classmethod
    def date_iso(cls, value: str) -> str:
        return validate_iso_date(value)

    @property
    def decimal_amount(self) -> Decimal:
        return Decimal(self.amount)

    def to_json(self) -> dict:
        """Convert to the camelCase JSON representation."""
        return self.model_dump(mode="json", by_alias=True)
