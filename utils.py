"""
Amount utilities. Amounts are kept as exact decimal strings to avoid
floating-point drift.
"""

import re
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from constants import MAX_AMOUNT

CENT = Decimal("0.01")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def to_decimal(amount: Union[float, str, Decimal, int]) -> Decimal:
    """
    Convert an amount to Decimal.

    Args:
        amount: Amount as float, string, Decimal or int

    Returns:
        Amount as Decimal

    Examples:
        >>> to_decimal("10.50")
        Decimal('10.50')
        >>> to_decimal(0.1)
        Decimal('0.1')
    """
    if isinstance(amount, bool):
        raise ValueError(f"Invalid amount type: {type(amount)}")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, float):
        value = Decimal(str(amount))
    elif isinstance(amount, (int, str)):
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid amount format: {amount}")
    else:
        raise ValueError(f"Invalid amount type: {type(amount)}")

    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount}")
    return value


def normalize_amount(amount: Union[float, str, Decimal, int]) -> str:
    """
    Validate a transaction amount and normalize it to a two-place decimal string.

    Args:
        amount: Amount to validate

    Returns:
        Normalized amount string

    Raises:
        ValueError: If amount is not positive or exceeds the maximum

    Examples:
        >>> normalize_amount(1000)
        '1000.00'
        >>> normalize_amount("12.345")
        '12.35'
    """
    value = to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    if value <= 0:
        raise ValueError("Amount must be positive")
    if value > Decimal(MAX_AMOUNT):
        raise ValueError("Amount exceeds maximum limit")
    return str(value)


def validate_iso_date(value: str) -> str:
    """
    Check that a value is a calendar date written as YYYY-MM-DD.

    Raises:
        ValueError: If the value is empty or not a valid ISO date
    """
    if not value:
        raise ValueError("Date is required")
    if not ISO_DATE_PATTERN.match(value):
        raise ValueError("Date must use the YYYY-MM-DD format")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise ValueError("Date must be a valid calendar date")
    return value


def format_currency(amount: Union[str, Decimal, int]) -> str:
    """
    Format an amount as a US dollar string.

    Examples:
        >>> format_currency(Decimal("1234.5"))
        '$1,234.50'
        >>> format_currency("-10")
        '-$10.00'
    """
    value = to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"
