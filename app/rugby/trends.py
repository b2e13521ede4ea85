"""
Wellness trends over a trailing window.

For one player's entries the trend reports, per metric, the latest value,
the change against the earliest entry of the window and a direction
label.  A configurable list of :class:`AlertRule` is then scanned over the
changes to produce alert messages.

Window
------
``window_days`` is one of 7, 14 or 30.  The window ends at ``as_of``
(default: the most recent entry date) and includes both ends, so a 7-day
window ending on the 14th spans the 8th to the 14th.

Entries sharing a date collapse to the last one supplied: a later
submission for the same day is a correction, not an extra data point.

Direction
---------
Changes are rounded to 2 decimals before classification.  With the default
``stable_epsilon`` of 0.0 only an exact zero change is ``stable``.  A
positive epsilon widens the stable band to ``|change| <= epsilon``.
"""

from __future__ import annotations

import datetime
from enum import IntEnum
from typing import Any, Iterable, Literal, Optional

from pydantic import BaseModel, Field

from app.rugby.exceptions import InsufficientData, InvalidTrendWindow
from app.rugby.readiness import compute_readiness, effective_rating, read_field
from app.schemas.trend import MetricTrend, TrendDirection, TrendMetrics, WellnessTrend

TrendMetric = Literal["sleep_quality", "fatigue_level", "muscle_soreness", "readiness_score"]

TREND_METRICS: tuple[str, ...] = (
    "sleep_quality",
    "fatigue_level",
    "muscle_soreness",
    "readiness_score",
)

MIN_TREND_ENTRIES = 2


class TrendWindow(IntEnum):
    WEEK = 7
    FORTNIGHT = 14
    MONTH = 30

    @property
    def period(self) -> str:
        return f"{self.value}day"


def parse_window(value: int | str) -> TrendWindow:
    """Accept ``7`` / ``"7"`` / ``"7day"`` style window labels."""
    raw = value
    if isinstance(value, str):
        raw = value.removesuffix("day").strip()
    elif isinstance(value, float) and not value.is_integer():
        raise InvalidTrendWindow(value)
    try:
        return TrendWindow(int(raw))
    except (TypeError, ValueError):
        raise InvalidTrendWindow(value) from None


# ======================================================================
# Alert rules
# ======================================================================


class AlertRule(BaseModel):
    """Threshold on a metric's change.

    ``direction="down"`` fires when ``change < threshold``;
    ``direction="up"`` fires when ``change > threshold``.
    """

    metric: TrendMetric
    direction: Literal["up", "down"]
    threshold: float
    message: str

    def fires(self, change: float) -> bool:
        if self.direction == "down":
            return change < self.threshold
        return change > self.threshold


DEFAULT_ALERT_RULES: tuple[AlertRule, ...] = (
    AlertRule(metric="sleep_quality", direction="down", threshold=-0.5,
              message="Sleep quality declining over the period"),
    AlertRule(metric="fatigue_level", direction="up", threshold=0.5,
              message="Fatigue levels increasing - consider load adjustment"),
    AlertRule(metric="muscle_soreness", direction="up", threshold=0.5,
              message="Muscle soreness increasing - review recovery protocols"),
    AlertRule(metric="readiness_score", direction="down", threshold=-0.5,
              message="Readiness score dropping - monitor closely"),
)


class TrendConfig(BaseModel):
    """Configuration for the trend computation."""

    stable_epsilon: float = Field(default=0.0, ge=0.0)
    alert_rules: list[AlertRule] = Field(
        default_factory=lambda: list(DEFAULT_ALERT_RULES),
    )


DEFAULT_TREND_CONFIG = TrendConfig()


# ======================================================================
# Helpers
# ======================================================================


def _direction(change: float, epsilon: float) -> TrendDirection:
    if change > epsilon:
        return "up"
    if change < -epsilon:
        return "down"
    return "stable"


def _metric_value(entry: Any, metric: str) -> float:
    if metric == "readiness_score":
        stored = read_field(entry, "readiness_score")
        return stored if stored is not None else compute_readiness(entry)
    return effective_rating(entry, metric)


def select_window(
    entries: Iterable[Any],
    window: TrendWindow,
    as_of: Optional[datetime.date] = None,
) -> list[Any]:
    """Return one entry per date inside the window, oldest first."""
    by_date: dict[datetime.date, Any] = {}
    for entry in entries:
        by_date[read_field(entry, "date")] = entry
    if not by_date:
        return []

    end = as_of or max(by_date)
    start = end - datetime.timedelta(days=window.value - 1)
    return [by_date[d] for d in sorted(by_date) if start <= d <= end]


def evaluate_alerts(trends: TrendMetrics, rules: Iterable[AlertRule]) -> list[str]:
    """Messages of every rule whose threshold the trend crosses."""
    alerts: list[str] = []
    for rule in rules:
        metric: MetricTrend = getattr(trends, rule.metric)
        if rule.fires(metric.change):
            alerts.append(rule.message)
    return alerts


# ======================================================================
# Main entry point
# ======================================================================


def compute_trend(
    entries: Iterable[Any],
    window_days: int | str,
    as_of: Optional[datetime.date] = None,
    config: Optional[TrendConfig] = None,
    player_id: Optional[int] = None,
) -> WellnessTrend:
    """Compute a player's wellness trend over a trailing window.

    Args:
        entries: The player's entries (mappings or objects with ``date``
            and rating attributes).  Order only matters between entries
            sharing a date; the last one wins.
        window_days: 7, 14 or 30 (or ``"7day"``-style labels).
        as_of: Last day of the window. Defaults to the latest entry date.
        config: Optional config override.
        player_id: Copied onto the result.

    Returns:
        :class:`WellnessTrend` for the window.

    Raises:
        InvalidTrendWindow: If ``window_days`` is not 7, 14 or 30.
        InsufficientData: If fewer than two entries fall in the window.
    """
    cfg = config or DEFAULT_TREND_CONFIG
    window = parse_window(window_days)

    in_window = select_window(entries, window, as_of)
    if len(in_window) < MIN_TREND_ENTRIES:
        raise InsufficientData(window.value, len(in_window))

    earliest, latest = in_window[0], in_window[-1]

    metric_trends: dict[str, MetricTrend] = {}
    for metric in TREND_METRICS:
        current = _metric_value(latest, metric)
        change = round(current - _metric_value(earliest, metric), 2)
        metric_trends[metric] = MetricTrend(
            current=current,
            change=change,
            direction=_direction(change, cfg.stable_epsilon),
        )
    trends = TrendMetrics(**metric_trends)

    return WellnessTrend(
        player_id=player_id,
        period=window.period,
        window_days=window.value,
        start_date=read_field(earliest, "date"),
        end_date=read_field(latest, "date"),
        entries_count=len(in_window),
        trends=trends,
        alerts=evaluate_alerts(trends, cfg.alert_rules),
    )
