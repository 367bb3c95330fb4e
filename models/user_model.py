"""
SQLModel and pydantic models for users.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """SQLModel model for registered users."""

    __tablename__ = "users"

    # Primary key, assigned by the repository's id generator
    id: Optional[int] = Field(default=None, primary_key=True)

    # User details
    name: str
    email: str = Field(unique=True, index=True)
    password: str = Field(description="bcrypt hash of the user's password")

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.now)

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, name='{self.name}', email='{self.email}')>"


def _normalize_email(value: str) -> str:
    if not isinstance(value, str):
        raise ValueError("Please enter a valid email")
    value = value.strip()
    try:
        _, email = validate_email(value)
    except ValueError:
        raise ValueError("Please enter a valid email")
    return email.lower()


class UserCreate(BaseModel):
    """Registration payload."""

    name: str
    email: str
    password: str

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def email_valid(cls, value) -> str:
        return _normalize_email(value)

    @field_validator("password")
    @classmethod
    def password_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required")
        return value


class UserLogin(BaseModel):
    """Login payload."""

    email: str
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def email_valid(cls, value) -> str:
        return _normalize_email(value)

    @field_validator("password")
    @classmethod
    def password_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required")
        return value


class UserRecord(BaseModel):
    """User as returned by the API and held by the client session."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    name: str
    email: str
    created_at: datetime
