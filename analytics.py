"""
Aggregations over a transaction collection.

Every function here is pure, runs in a single pass over its input and uses
Decimal arithmetic on the stored amount strings. An empty collection yields
an empty or all-zero result.
"""

from collections import OrderedDict
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from constants import RECENT_TRANSACTION_COUNT, SAVINGS_GOALS, TransactionType
from models import TransactionRecord

ZERO = Decimal("0.00")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FinancialSummary(_CamelModel):
    income: Decimal = ZERO
    expenses: Decimal = ZERO
    balance: Decimal = ZERO


class CategoryTotal(_CamelModel):
    category: str
    amount: Decimal


class MonthlyTotals(_CamelModel):
    month: str
    label: str
    income: Decimal = ZERO
    expenses: Decimal = ZERO


class ChartSlice(_CamelModel):
    name: str
    value: Decimal


class GoalProgress(_CamelModel):
    target: Decimal
    saved: Decimal
    percent: int


def _is_income(transaction: TransactionRecord) -> bool:
    return transaction.type == TransactionType.INCOME


def summarize(transactions: Iterable[TransactionRecord]) -> FinancialSummary:
    """
    Total income and expenses, and the balance between them.

    Args:
        transactions: Transactions to aggregate

    Returns:
        FinancialSummary where balance == income - expenses
    """
    income = ZERO
    expenses = ZERO
    for transaction in transactions:
        if _is_income(transaction):
            income += transaction.decimal_amount
        else:
            expenses += transaction.decimal_amount
    return FinancialSummary(income=income, expenses=expenses, balance=income - expenses)


def category_breakdown(
    transactions: Iterable[TransactionRecord], limit: Optional[int] = None
) -> List[CategoryTotal]:
    """
    Expense totals per category, largest first.

    Categories with equal totals keep the order in which they were first
    encountered.

    Args:
        transactions: Transactions to aggregate; income is ignored
        limit: Keep only the first ``limit`` categories

    Returns:
        List of CategoryTotal
    """
    totals: Dict[str, Decimal] = OrderedDict()
    for transaction in transactions:
        if _is_income(transaction):
            continue
        totals[transaction.category] = totals.get(transaction.category, ZERO) + transaction.decimal_amount

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return [CategoryTotal(category=category, amount=amount) for category, amount in ranked]


def month_label(month: str) -> str:
    """
    Human-readable label for a YYYY-MM key.

    Examples:
        >>> month_label("2024-01")
        'Jan 2024'
    """
    return date.fromisoformat(f"{month}-01").strftime("%b %Y")


def monthly_trend(transactions: Iterable[TransactionRecord]) -> List[MonthlyTotals]:
    """
    Income and expense sums per calendar month, oldest month first.

    The month key is the YYYY-MM prefix of the transaction date; the format is
    fixed width, so sorting the keys as strings is chronological.
    """
    months: Dict[str, List[Decimal]] = {}
    for transaction in transactions:
        month = transaction.date[:7]
        sums = months.setdefault(month, [ZERO, ZERO])
        if _is_income(transaction):
            sums[0] += transaction.decimal_amount
        else:
            sums[1] += transaction.decimal_amount

    return [
        MonthlyTotals(month=month, label=month_label(month), income=sums[0], expenses=sums[1])
        for month, sums in sorted(months.items())
    ]


def income_expense_split(transactions: Iterable[TransactionRecord]) -> List[ChartSlice]:
    """Two-slice income versus expenses chart data."""
    summary = summarize(transactions)
    return [
        ChartSlice(name="Income", value=summary.income),
        ChartSlice(name="Expenses", value=summary.expenses),
    ]


def has_activity(slices: Iterable[ChartSlice]) -> bool:
    return any(chart_slice.value != 0 for chart_slice in slices)


def goal_progress(balance: Decimal, target: Union[Decimal, int, str]) -> GoalProgress:
    """
    Progress of the current balance toward a savings target.

    A negative balance counts as nothing saved; the percentage is clamped
    to 0..100.
    """
    target = Decimal(target)
    if target <= 0:
        raise ValueError("Savings target must be positive")
    saved = max(balance, ZERO)
    percent = min(saved / target * 100, Decimal(100)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return GoalProgress(target=target, saved=saved, percent=int(percent))


def savings_goals(
    balance: Decimal, targets: Sequence[Union[Decimal, int, str]] = SAVINGS_GOALS
) -> List[GoalProgress]:
    return [goal_progress(balance, target) for target in targets]


def recent(
    transactions: Sequence[TransactionRecord], count: int = RECENT_TRANSACTION_COUNT
) -> List[TransactionRecord]:
    """The first ``count`` transactions of a newest-first collection."""
    return list(transactions[:count])


def distinct_categories(transactions: Iterable[TransactionRecord]) -> List[str]:
    """Categories in first-encounter order."""
    return list(OrderedDict.fromkeys(transaction.category for transaction in transactions))
