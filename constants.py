from enum import Enum


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


# Suggested vocabulary offered by the transaction form; not enforced.
INCOME_CATEGORIES = ["Salary", "Freelance", "Investment", "Gift", "Other Income"]
EXPENSE_CATEGORIES = [
    "Food",
    "Transportation",
    "Entertainment",
    "Shopping",
    "Bills",
    "Healthcare",
    "Other Expense",
]

SUGGESTED_CATEGORIES = {
    TransactionType.INCOME: INCOME_CATEGORIES,
    TransactionType.EXPENSE: EXPENSE_CATEGORIES,
}

STORAGE_KEY_PREFIX = "financeApp"
CURRENT_USER_KEY = f"{STORAGE_KEY_PREFIX}_currentUser"

TOP_CATEGORY_LIMIT = 5
RECENT_TRANSACTION_COUNT = 5
SAVINGS_GOALS = (5000, 10000)

# decimal(10, 2) column range
MAX_AMOUNT = "99999999.99"


def transactions_key(user_id: int) -> str:
    """Storage key holding one user's transaction list."""
    return f"{STORAGE_KEY_PREFIX}_transactions_{user_id}"
