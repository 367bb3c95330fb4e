"""
Filtering of a transaction collection by type, category and date range.
"""

from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from constants import TransactionType
from models import TransactionRecord
from utils import validate_iso_date


class TransactionFilter(BaseModel):
    """
    A set of optional constraints. An empty or missing value places no
    constraint on that dimension; the date bounds are inclusive.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    type: Optional[TransactionType] = None
    category: Optional[str] = None
    from_date: Optional[str] = None
    to_date: Optional[str] = None

    @field_validator("type", "category", "from_date", "to_date", mode="before")
    @classmethod
    def blank_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("from_date", "to_date")
    @classmethod
    def date_iso(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return validate_iso_date(value)

    @property
    def is_empty(self) -> bool:
        return not (self.type or self.category or self.from_date or self.to_date)

    def matches(self, transaction: TransactionRecord) -> bool:
        """Check one transaction against every active constraint."""
        if self.type and transaction.type != self.type:
            return False
        if self.category and transaction.category != self.category:
            return False
        # ISO dates are zero padded, so string order is date order
        if self.from_date and transaction.date < self.from_date:
            return False
        if self.to_date and transaction.date > self.to_date:
            return False
        return True


def apply_filters(
    transactions: Iterable[TransactionRecord], transaction_filter: Optional[TransactionFilter]
) -> List[TransactionRecord]:
    """
    Return the matching transactions in their original order.

    Args:
        transactions: Collection to filter
        transaction_filter: Constraints; None or an empty filter keeps everything

    Returns:
        New list of matching transactions
    """
    if transaction_filter is None or transaction_filter.is_empty:
        return list(transactions)
    return [transaction for transaction in transactions if transaction_filter.matches(transaction)]
