"""
Wellness entry repository.

Handles database operations for WellnessEntry model.  This is the only
data source the trend and squad computations read from; they receive the
rows as plain lists.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.wellness import WellnessEntry


class WellnessRepository:
    """Repository for WellnessEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WellnessEntry) -> WellnessEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[WellnessEntry]:
        return self.session.get(WellnessEntry, entry_id)

    def get_by_player_and_date(
        self, player_id: int, date: datetime.date,
    ) -> Optional[WellnessEntry]:
        """Get the entry for a player on a specific date."""
        statement = select(WellnessEntry).where(
            WellnessEntry.player_id == player_id,
            WellnessEntry.date == date,
        )
        return self.session.exec(statement).first()

    def entries_for_player(
        self, player_id: int, start: datetime.date, end: datetime.date,
    ) -> list[WellnessEntry]:
        """Get a player's entries within a date range (inclusive), oldest first."""
        statement = (
            select(WellnessEntry)
            .where(
                WellnessEntry.player_id == player_id,
                WellnessEntry.date >= start,
                WellnessEntry.date <= end,
            )
            .order_by(WellnessEntry.date)
        )
        return list(self.session.exec(statement).all())

    def entries_on_date(self, date: datetime.date) -> list[WellnessEntry]:
        """Get every player's entry for a date."""
        statement = (
            select(WellnessEntry)
            .where(WellnessEntry.date == date)
            .order_by(WellnessEntry.player_id)
        )
        return list(self.session.exec(statement).all())

    def update(self, entry: WellnessEntry) -> WellnessEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry
