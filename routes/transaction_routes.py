"""
Transaction routes for the financial API.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

import analytics
from constants import SUGGESTED_CATEGORIES, TOP_CATEGORY_LIMIT, TransactionType
from models import TransactionCreate, TransactionRecord
from repositories import TransactionRepository, UserRepository
from routes.dependencies import get_transaction_repository, get_user_repository

# Create router
router = APIRouter(prefix="/api/transactions", tags=["transactions"])


# Pydantic models
class SuggestedCategoriesResponse(BaseModel):
    income: List[str]
    expense: List[str]


class TransactionCreateRequest(TransactionCreate):
    user_id: Optional[int] = None


class TransactionDeleteRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: Optional[int] = None


class MessageResponse(BaseModel):
    message: str


class DashboardResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    summary: analytics.FinancialSummary
    top_categories: List[analytics.CategoryTotal]
    monthly_trend: List[analytics.MonthlyTotals]
    goals: List[analytics.GoalProgress]


def _require_user(user_id: int, users: UserRepository) -> None:
    if users.get(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


@router.get("/{user_id}", response_model=List[TransactionRecord])
def list_transactions(
    user_id: int,
    transactions: TransactionRepository = Depends(get_transaction_repository),
):
    """Return a user's transactions, newest created first."""
    return [TransactionRecord.model_validate(tx) for tx in transactions.list_for_user(user_id)]


@router.get("/{user_id}/summary", response_model=DashboardResponse)
def transaction_summary(
    user_id: int,
    transactions: TransactionRepository = Depends(get_transaction_repository),
    users: UserRepository = Depends(get_user_repository),
):
    """Summary totals, top expense categories, monthly trend and savings goals."""
    _require_user(user_id, users)
    records = [TransactionRecord.model_validate(tx) for tx in transactions.list_for_user(user_id)]
    summary = analytics.summarize(records)

    return DashboardResponse(
        summary=summary,
        top_categories=analytics.category_breakdown(records, limit=TOP_CATEGORY_LIMIT),
        monthly_trend=analytics.monthly_trend(records),
        goals=analytics.savings_goals(summary.balance),
    )


@router.post("", response_model=TransactionRecord)
def create_transaction(
    request: TransactionCreateRequest,
    transactions: TransactionRepository = Depends(get_transaction_repository),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Create a new transaction.

    Args:
        request: Transaction fields plus the owning userId

    Returns:
        The created transaction, amount as a two-place decimal string
    """
    if not request.user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User ID is required")
    _require_user(request.user_id, users)

    transaction = transactions.insert_transaction(request.user_id, request)
    return TransactionRecord.model_validate(transaction)


@router.delete("/{transaction_id}", response_model=MessageResponse)
def delete_transaction(
    transaction_id: int,
    request: Optional[TransactionDeleteRequest] = Body(default=None),
    transactions: TransactionRepository = Depends(get_transaction_repository),
):
    """Delete a transaction owned by the userId given in the body."""
    if request is None or not request.user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User ID is required")

    if not transactions.delete_transaction(transaction_id, request.user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")

    return MessageResponse(message="Transaction deleted successfully")


categories_router = APIRouter(prefix="/api", tags=["transactions"])


@categories_router.get("/categories", response_model=SuggestedCategoriesResponse)
def suggested_categories():
    """Category vocabulary offered by the transaction form."""
    return SuggestedCategoriesResponse(
        income=SUGGESTED_CATEGORIES[TransactionType.INCOME],
        expense=SUGGESTED_CATEGORIES[TransactionType.EXPENSE],
    )
