"""
Daily readiness score from subjective wellness ratings.

Model
-----
Each morning a player rates five items on a 1-5 scale:

    sleep_quality    (5 = slept very well)
    fatigue_level    (5 = exhausted)
    muscle_soreness  (5 = very sore)
    stress_level     (5 = very stressed)
    mood             (5 = very good)

Fatigue, soreness and stress are "bad when high" and are inverted
(``6 - x``) so every term reads "higher is better".  The five terms sum to
a value in [5, 25], which is rescaled to the 0-5 readiness scale:

    score = round(sum / 25 × 5, 2)

The score is classified with two fixed cutoffs:

    green   score >= 4.0
    amber   2.5 <= score < 4.0
    red     score < 2.5

Lenient inputs
--------------
A missing rating counts as the neutral midpoint (3) and an out-of-range
rating is clamped to [1, 5].  An empty submission therefore scores 3.0
(amber) instead of failing.  Strict 1-5 validation happens at the HTTP
boundary, not here.

This is the only place the score is computed; stored entries, imports and
the stateless calculator endpoint all go through :func:`compute_readiness`.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field

ReadinessStatus = Literal["red", "amber", "green"]

NEUTRAL_RATING = 3
RATING_MIN = 1
RATING_MAX = 5

# Rating fields feeding the score.  ``True`` marks "bad when high".
READINESS_FIELDS: dict[str, bool] = {
    "sleep_quality": False,
    "fatigue_level": True,
    "muscle_soreness": True,
    "stress_level": True,
    "mood": False,
}

_MAX_SUM = RATING_MAX * len(READINESS_FIELDS)
_SCORE_SCALE = 5.0


class ReadinessConfig(BaseModel):
    """Classification cutoffs (lower bound of each band is inclusive)."""

    green_threshold: float = Field(default=4.0)
    amber_threshold: float = Field(default=2.5)


DEFAULT_READINESS_CONFIG = ReadinessConfig()


def read_field(source: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an attribute-bearing object."""
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def effective_rating(ratings: Any, name: str) -> float:
    """Rating ``name`` with the neutral default and clamping applied.

    ``ratings`` may be a mapping or any object exposing the rating
    attributes (a schema, a database row).
    """
    value = read_field(ratings, name)
    if value is None:
        return NEUTRAL_RATING
    return min(max(value, RATING_MIN), RATING_MAX)


def compute_readiness(ratings: Any) -> float:
    """Compute the 0-5 readiness score for one set of ratings."""
    total = 0.0
    for name, inverted in READINESS_FIELDS.items():
        value = effective_rating(ratings, name)
        total += (RATING_MAX + 1 - value) if inverted else value
    return round(total / _MAX_SUM * _SCORE_SCALE, 2)


def classify(
    score: float,
    config: Optional[ReadinessConfig] = None,
) -> ReadinessStatus:
    """Map a readiness score to its traffic-light status."""
    cfg = config or DEFAULT_READINESS_CONFIG
    if score >= cfg.green_threshold:
        return "green"
    if score >= cfg.amber_threshold:
        return "amber"
    return "red"


def assess_readiness(
    ratings: Any,
    config: Optional[ReadinessConfig] = None,
) -> tuple[float, ReadinessStatus]:
    """Score and classify in one call. Returns ``(score, status)``."""
    score = compute_readiness(ratings)
    return score, classify(score, config)
