"""Business logic services."""

from app.services.user_service import UserService
from app.services.wellness_service import WellnessService
from app.services.wellness_import import WellnessImportService

__all__ = [
    "UserService",
    "WellnessService",
    "WellnessImportService",
]
