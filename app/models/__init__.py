"""SQLModel database models."""

from app.models.user import User
from app.models.wellness import WellnessEntry

__all__ = [
    "User",
    "WellnessEntry",
]
