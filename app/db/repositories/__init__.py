"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.wellness import WellnessRepository

__all__ = [
    "UserRepository",
    "WellnessRepository",
]
