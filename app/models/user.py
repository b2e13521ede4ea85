"""
User database model.

Defines the User table for authentication and role assignment.
Players are users with the ``player`` role; their wellness entries
reference ``users.id``.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from app.rugby.permissions import Role


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """
    User model for authentication.

    Stores credentials, profile information and the single role that
    drives every authorization decision.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    # Profile
    full_name: Optional[str] = Field(default=None, max_length=255)
    role: str = Field(default=Role.PLAYER.value, max_length=32, nullable=False, index=True)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False),
    )
