"""Squad readiness overview schemas."""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

ReadinessStatus = Literal["red", "amber", "green"]


class ReadinessBreakdown(BaseModel):
    green: int = 0
    amber: int = 0
    red: int = 0


class ReadinessConcern(BaseModel):
    """A player flagged on the squad overview."""

    player_id: int
    player_name: Optional[str] = None
    readiness_score: float
    status: ReadinessStatus
    primary_concern: str = Field(..., description="Worst-rated wellness items, e.g. 'High fatigue + poor sleep'")


class SquadReadiness(BaseModel):
    """Readiness of every player who submitted an entry on ``date``."""

    date: datetime.date
    total_players: int
    readiness_breakdown: ReadinessBreakdown
    average_readiness_score: Optional[float] = Field(
        None, description="Mean score, None when nobody submitted",
    )
    top_concerns: list[ReadinessConcern] = Field(default_factory=list)
    calculated_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))
