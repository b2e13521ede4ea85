"""Pydantic schemas for request/response validation."""

from app.schemas.token import Token
from app.schemas.user import RoleAssignment, UserCreate, UserLogin, UserResponse
from app.schemas.role import RoleInfo
from app.schemas.wellness import (
    ImportRowError,
    ReadinessResult,
    WellnessEntryCreate,
    WellnessEntryResponse,
    WellnessImportResult,
    WellnessRatings,
    WellnessReviewUpdate,
)
from app.schemas.trend import MetricTrend, TrendMetrics, WellnessTrend, WellnessTrendResponse
from app.schemas.squad import ReadinessBreakdown, ReadinessConcern, SquadReadiness

__all__ = [
    "Token",
    "RoleAssignment",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "RoleInfo",
    "ImportRowError",
    "ReadinessResult",
    "WellnessEntryCreate",
    "WellnessEntryResponse",
    "WellnessImportResult",
    "WellnessRatings",
    "WellnessReviewUpdate",
    "MetricTrend",
    "TrendMetrics",
    "WellnessTrend",
    "WellnessTrendResponse",
    "ReadinessBreakdown",
    "ReadinessConcern",
    "SquadReadiness",
]
