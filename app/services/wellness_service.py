"""
Wellness service.

Business logic for daily wellness entries: upsert with readiness scoring,
staff review, trends and the squad overview.  Authorization is the
caller's job (see ``app.api.dependencies``); this layer only checks that
the referenced player and entries exist.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.core.logging import get_logger
from app.db.repositories.user import UserRepository
from app.db.repositories.wellness import WellnessRepository
from app.models.user import User
from app.models.wellness import WellnessEntry
from app.rugby.exceptions import InsufficientData, InvalidTrendWindow
from app.rugby.permissions import Role
from app.rugby.readiness import assess_readiness
from app.rugby.squad import summarize_squad
from app.rugby.trends import TrendConfig, compute_trend, parse_window
from app.schemas.squad import SquadReadiness
from app.schemas.trend import WellnessTrendResponse
from app.schemas.wellness import (
    EntryMethod,
    WellnessEntryCreate,
    WellnessEntryResponse,
    WellnessReviewUpdate,
)

logger = get_logger(__name__)

_ENTRY_FIELDS = (
    "sleep_quality",
    "muscle_soreness",
    "fatigue_level",
    "stress_level",
    "mood",
    "nutrition_adherence",
    "sleep_hours",
    "session_rpe",
    "soreness_areas",
)


class WellnessService:
    """Service for wellness entry business logic."""

    def __init__(self, session: Session):
        self.repository = WellnessRepository(session)
        self.users = UserRepository(session)

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def upsert(
        self,
        player_id: int,
        date: datetime.date,
        data: WellnessEntryCreate,
        submitted_by: User,
        entry_method: Optional[EntryMethod] = None,
    ) -> tuple[WellnessEntryResponse, bool]:
        """Create the player's entry for ``date``, or correct the existing one.

        A second submission for the same day is a correction: fields set
        in ``data`` replace the stored ones, fields left out keep their
        stored value, and the score is recomputed from the merged entry.
        Review annotations are kept.

        Returns:
            Tuple of (response, created) where created is True if new entry.
        """
        self.get_player(player_id)
        method = entry_method or ("player_input" if submitted_by.id == player_id else "staff_manual")
        values = data.model_dump(include=set(_ENTRY_FIELDS), exclude_unset=True)

        existing = self.repository.get_by_player_and_date(player_id, date)
        if existing:
            for key, value in values.items():
                setattr(existing, key, value)
            score, readiness_status = assess_readiness(existing)
            existing.readiness_score = score
            existing.readiness_status = readiness_status
            existing.entry_method = method
            existing.submitted_by = submitted_by.id
            existing.updated_at = datetime.datetime.now(datetime.timezone.utc)
            entry = self.repository.update(existing)
            logger.info("Corrected wellness entry %s for player %s on %s", entry.id, player_id, date)
            return WellnessEntryResponse.model_validate(entry), False

        score, readiness_status = assess_readiness(data)
        entry = WellnessEntry(
            player_id=player_id,
            date=date,
            readiness_score=score,
            readiness_status=readiness_status,
            entry_method=method,
            submitted_by=submitted_by.id,
            **values,
        )
        entry = self.repository.create(entry)
        logger.info("Created wellness entry %s for player %s on %s (%s %.2f)",
                    entry.id, player_id, date, readiness_status, score)
        return WellnessEntryResponse.model_validate(entry), True

    def get_by_date(self, player_id: int, date: datetime.date) -> WellnessEntryResponse:
        entry = self.repository.get_by_player_and_date(player_id, date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No wellness entry for {date}",
            )
        return WellnessEntryResponse.model_validate(entry)

    def get_recent(
        self, player_id: int, days: int = 30, as_of: Optional[datetime.date] = None,
    ) -> list[WellnessEntryResponse]:
        """Entries from the last ``days`` days (inclusive of ``as_of``), oldest first."""
        end = as_of or datetime.date.today()
        start = end - datetime.timedelta(days=days - 1)
        entries = self.repository.entries_for_player(player_id, start, end)
        return [WellnessEntryResponse.model_validate(e) for e in entries]

    def get_entry(self, entry_id: int) -> WellnessEntry:
        entry = self.repository.get_by_id(entry_id)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Wellness entry not found",
            )
        return entry

    def review(
        self, entry_id: int, data: WellnessReviewUpdate, reviewer: User,
    ) -> WellnessEntryResponse:
        """Attach a staff review annotation. The score is left untouched."""
        entry = self.get_entry(entry_id)
        entry.staff_review = data.staff_review
        if data.staff_notes is not None:
            entry.staff_notes = data.staff_notes
        entry.reviewed_by = reviewer.id
        entry.reviewed_at = datetime.datetime.now(datetime.timezone.utc)
        entry = self.repository.update(entry)
        logger.info("Entry %s reviewed by %s: %s", entry.id, reviewer.id, entry.staff_review)
        return WellnessEntryResponse.model_validate(entry)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def trend(
        self,
        player_id: int,
        period: str,
        as_of: Optional[datetime.date] = None,
        config: Optional[TrendConfig] = None,
    ) -> WellnessTrendResponse:
        """Trend over the trailing window ending ``as_of`` (default today)."""
        try:
            window = parse_window(period)
        except InvalidTrendWindow as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

        end = as_of or datetime.date.today()
        start = end - datetime.timedelta(days=window.value - 1)
        entries = self.repository.entries_for_player(player_id, start, end)
        cfg = config or TrendConfig(stable_epsilon=settings.TREND_STABLE_EPSILON)

        try:
            trend = compute_trend(entries, window, as_of=end, config=cfg, player_id=player_id)
        except InsufficientData as exc:
            return WellnessTrendResponse(
                player_id=player_id,
                period=window.period,
                status="insufficient_history",
                entries_count=exc.entries_found,
                detail=str(exc),
            )

        if trend.alerts:
            logger.info("Wellness alerts for player %s: %s", player_id, "; ".join(trend.alerts))
        return WellnessTrendResponse(
            player_id=player_id,
            period=window.period,
            status="ok",
            entries_count=trend.entries_count,
            trend=trend,
        )

    def squad_readiness(self, date: datetime.date, limit: int = 3) -> SquadReadiness:
        entries = self.repository.entries_on_date(date)
        names = self.users.get_names(e.player_id for e in entries)
        return summarize_squad(entries, date, limit=limit, player_names=names)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def get_player(self, player_id: int) -> User:
        """Get a user holding the player role."""
        player = self.users.get_by_id(player_id)
        if not player or player.role != Role.PLAYER.value:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Player not found",
            )
        return player
