"""
Wellness API schemas.

Pydantic models for daily wellness entry request/response validation.
Ratings use a 1-5 scale and are optional; a missing rating counts as the
neutral midpoint when the readiness score is computed.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ReadinessStatus = Literal["red", "amber", "green"]
StaffReview = Literal["pending", "reviewed", "action_required"]
EntryMethod = Literal["player_input", "staff_manual", "imported"]

SorenessArea = Literal[
    "hamstrings", "quadriceps", "calves", "glutes", "back_lower", "back_upper",
    "shoulders", "neck", "chest", "arms", "core", "hip_flexors",
]

def _rating(description: str):
    return Field(None, ge=1, le=5, description=description)


# ---------------------------------------------------------------------------
# Readiness calculator
# ---------------------------------------------------------------------------

class WellnessRatings(BaseModel):
    """The five ratings that feed the readiness score."""

    sleep_quality: Optional[int] = _rating("Sleep quality (5 = excellent)")
    fatigue_level: Optional[int] = _rating("Fatigue (5 = exhausted)")
    muscle_soreness: Optional[int] = _rating("Muscle soreness (5 = very sore)")
    stress_level: Optional[int] = _rating("Stress (5 = very stressed)")
    mood: Optional[int] = _rating("Mood (5 = very good)")


class ReadinessResult(BaseModel):
    score: float = Field(..., ge=0.0, le=5.0, description="Readiness on the 0-5 scale")
    status: ReadinessStatus


# ---------------------------------------------------------------------------
# Entity schemas (Base / Create / Response)
# ---------------------------------------------------------------------------

class WellnessEntryBase(WellnessRatings):
    """Submitted wellness data shared by request and response schemas."""

    nutrition_adherence: Optional[int] = _rating("Nutrition plan adherence (5 = fully)")
    sleep_hours: Optional[float] = Field(
        None, ge=0.0, le=24.0,
        description="Hours slept",
    )
    session_rpe: Optional[int] = Field(
        None, ge=1, le=10,
        description="Rate of perceived exertion of the linked training session",
    )
    soreness_areas: list[SorenessArea] = Field(
        default_factory=list,
        description="Body areas reported sore",
    )


# Request schemas
class WellnessEntryCreate(WellnessEntryBase):
    """Schema for submitting (or correcting) a day's wellness entry."""
    pass


class WellnessReviewUpdate(BaseModel):
    """Staff review annotation. Never alters the readiness score."""

    staff_review: StaffReview
    staff_notes: Optional[str] = Field(None, max_length=2000)


# Response schemas
class WellnessEntryResponse(WellnessEntryBase):
    """Schema for wellness entry data in API responses."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    player_id: int
    date: datetime.date
    readiness_score: float
    readiness_status: ReadinessStatus
    entry_method: EntryMethod
    submitted_by: Optional[int] = None
    staff_review: StaffReview
    staff_notes: Optional[str] = None
    reviewed_by: Optional[int] = None
    reviewed_at: Optional[datetime.datetime] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime


# ---------------------------------------------------------------------------
# CSV import
# ---------------------------------------------------------------------------

class ImportRowError(BaseModel):
    row: int = Field(..., description="Line number in the file, header excluded (0 for header errors)")
    message: str


class WellnessImportResult(BaseModel):
    created: int = 0
    updated: int = 0
    errors: list[ImportRowError] = Field(default_factory=list)
