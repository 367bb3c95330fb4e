"""
Exception hierarchy shared by the API service and the client ledger.
"""

from typing import Any, Optional


class FinanceTrackerError(Exception):
    """Base error for the finance tracker."""


class InvalidInputError(FinanceTrackerError, ValueError):
    """Input failed validation; nothing was mutated."""


class DuplicateEmailError(InvalidInputError):
    """A user with this email is already registered."""

    def __init__(self, email: str):
        super().__init__("Email already exists")
        self.email = email


class NotFoundError(FinanceTrackerError):
    """Unknown user, or a transaction that is missing or owned by someone else."""


class AuthenticationError(FinanceTrackerError):
    """Email/password pair did not match a registered user."""


class NotAuthenticatedError(FinanceTrackerError):
    """A client ledger operation was attempted without a logged in user."""


class ApiError(FinanceTrackerError):
    """Non-2xx response from the finance tracker API."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message or f"Request failed with status {status_code}"
        super().__init__(self.message)


def first_error_message(error: Any) -> str:
    """
    Return the message of the first validation failure.

    Args:
        error: A pydantic ValidationError or FastAPI RequestValidationError

    Returns:
        Human-readable message, without pydantic's "Value error, " prefix
    """
    errors = error.errors()
    if not errors:
        return "Invalid input"
    message = errors[0].get("msg", "Invalid input")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return message
