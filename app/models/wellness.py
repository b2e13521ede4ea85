"""
Wellness entry database model.

Defines the wellness_entries table for daily player wellness submissions.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class WellnessEntry(SQLModel, table=True):
    """
    Daily wellness submission for one player.

    Ratings are 1-5 and may be missing.  ``readiness_score`` and
    ``readiness_status`` are computed on write; staff review fields are
    attached later and never touch the score.
    One entry per player per day (enforced by unique constraint).
    """
    __tablename__ = "wellness_entries"
    __table_args__ = (
        UniqueConstraint("player_id", "date", name="uq_wellness_player_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    player_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    # Ratings (1-5)
    sleep_quality: Optional[int] = Field(default=None)
    muscle_soreness: Optional[int] = Field(default=None)
    fatigue_level: Optional[int] = Field(default=None)
    stress_level: Optional[int] = Field(default=None)
    mood: Optional[int] = Field(default=None)
    nutrition_adherence: Optional[int] = Field(default=None)

    sleep_hours: Optional[float] = Field(default=None)
    session_rpe: Optional[int] = Field(default=None)
    soreness_areas: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    # Computed
    readiness_score: float = Field(nullable=False)
    readiness_status: str = Field(max_length=8, nullable=False)

    entry_method: str = Field(default="player_input", max_length=20, nullable=False)
    submitted_by: Optional[int] = Field(default=None, foreign_key="users.id")

    # Staff review
    staff_review: str = Field(default="pending", max_length=20, nullable=False)
    staff_notes: Optional[str] = Field(default=None, max_length=2000)
    reviewed_by: Optional[int] = Field(default=None, foreign_key="users.id")
    reviewed_at: Optional[datetime.datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True)))

    # Timestamps
    created_at: datetime.datetime = Field(
        default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: datetime.datetime = Field(
        default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False),
    )
