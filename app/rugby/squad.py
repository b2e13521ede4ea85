"""
Squad readiness overview.

Summarises the day's wellness entries across the squad: how many players
are green / amber / red, the average score, and the lowest-scoring red or
amber players with a short label naming their worst-rated items.
"""

from __future__ import annotations

import datetime
from typing import Any, Iterable, Mapping, Optional

from app.rugby.readiness import (
    RATING_MAX,
    READINESS_FIELDS,
    classify,
    compute_readiness,
    effective_rating,
    read_field,
)
from app.schemas.squad import ReadinessBreakdown, ReadinessConcern, SquadReadiness

# Inverted ("higher is better") rating at or below which an item is a concern.
_CONCERN_CUTOFF = 2

_CONCERN_LABELS: dict[str, str] = {
    "fatigue_level": "high fatigue",
    "sleep_quality": "poor sleep",
    "muscle_soreness": "muscle soreness",
    "stress_level": "stress",
    "mood": "low mood",
}


def primary_concern(entry: Any, max_items: int = 2) -> str:
    """Label the worst-rated wellness items of an entry.

    Items are ranked by their "higher is better" value; ties keep the order
    of ``_CONCERN_LABELS``.
    """
    scored: list[tuple[float, str]] = []
    for name in _CONCERN_LABELS:
        value = effective_rating(entry, name)
        if READINESS_FIELDS[name]:
            value = RATING_MAX + 1 - value
        if value <= _CONCERN_CUTOFF:
            scored.append((value, name))

    if not scored:
        return "General readiness below target"

    scored.sort(key=lambda item: item[0])
    labels = [_CONCERN_LABELS[name] for _, name in scored[:max_items]]
    text = " + ".join(labels)
    return text[0].upper() + text[1:]


def summarize_squad(
    entries: Iterable[Any],
    on_date: datetime.date,
    limit: int = 3,
    player_names: Optional[Mapping[int, str]] = None,
) -> SquadReadiness:
    """Build the squad overview from the entries recorded on ``on_date``.

    Args:
        entries: Wellness entries (any dates; others are ignored).
        on_date: Day to summarise.
        limit: Maximum number of players in ``top_concerns``.
        player_names: Optional ``player_id -> name`` lookup.
    """
    names = player_names or {}
    latest: dict[int, Any] = {}
    for entry in entries:
        if read_field(entry, "date") == on_date:
            latest[read_field(entry, "player_id")] = entry

    breakdown = ReadinessBreakdown()
    concerns: list[ReadinessConcern] = []
    total_score = 0.0

    for player_id, entry in latest.items():
        score = read_field(entry, "readiness_score")
        if score is None:
            score = compute_readiness(entry)
        status = classify(score)
        setattr(breakdown, status, getattr(breakdown, status) + 1)
        total_score += score

        if status != "green":
            concerns.append(ReadinessConcern(
                player_id=player_id,
                player_name=names.get(player_id),
                readiness_score=score,
                status=status,
                primary_concern=primary_concern(entry),
            ))

    concerns.sort(key=lambda c: (c.readiness_score, c.player_id))

    return SquadReadiness(
        date=on_date,
        total_players=len(latest),
        readiness_breakdown=breakdown,
        average_readiness_score=round(total_score / len(latest), 2) if latest else None,
        top_concerns=concerns[:limit],
    )
