"""
Wellness trend schemas.

A trend compares the most recent entry in a trailing window (7, 14 or 30
days) with the earliest one:

- ``current``: value on the latest entry in the window
- ``change``: ``current`` minus the value on the earliest entry
- ``direction``: ``up`` / ``down`` / ``stable``

Trends are derived on demand and never stored.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

TrendDirection = Literal["up", "down", "stable"]
TrendPeriod = Literal["7day", "14day", "30day"]


class MetricTrend(BaseModel):
    """Trend of a single metric over the window."""

    current: float = Field(..., description="Value on the most recent entry")
    change: float = Field(..., description="Latest minus earliest value, rounded to 2 decimals")
    direction: TrendDirection


class TrendMetrics(BaseModel):
    sleep_quality: MetricTrend
    fatigue_level: MetricTrend
    muscle_soreness: MetricTrend
    readiness_score: MetricTrend


class WellnessTrend(BaseModel):
    """Derived trend view over a player's entries."""

    player_id: Optional[int] = None
    period: TrendPeriod
    window_days: int
    start_date: datetime.date = Field(..., description="Earliest entry date in the window")
    end_date: datetime.date = Field(..., description="Latest entry date in the window")
    entries_count: int = Field(..., ge=2)
    trends: TrendMetrics
    alerts: list[str] = Field(default_factory=list)
    calculated_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))


class WellnessTrendResponse(BaseModel):
    """Trend endpoint payload.

    ``status`` is ``insufficient_history`` when the window holds fewer than
    two entries; ``trend`` is then omitted.
    """

    player_id: int
    period: TrendPeriod
    status: Literal["ok", "insufficient_history"]
    entries_count: int
    trend: Optional[WellnessTrend] = None
    detail: Optional[str] = None
