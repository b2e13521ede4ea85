"""
Wellness endpoints.

Daily wellness entries with date-based upsert, staff review, trends, the
squad readiness overview, CSV import and a stateless readiness calculator.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, Response, UploadFile, status
from sqlmodel import Session

from app.api.dependencies import get_current_user, require_permission, require_self_or_permission
from app.core.config import settings
from app.db.session import get_db
from app.models.user import User
from app.rugby.permissions import Permission
from app.rugby.readiness import assess_readiness
from app.schemas.squad import SquadReadiness
from app.schemas.trend import TrendPeriod, WellnessTrendResponse
from app.schemas.wellness import (
    ReadinessResult,
    WellnessEntryCreate,
    WellnessEntryResponse,
    WellnessImportResult,
    WellnessRatings,
    WellnessReviewUpdate,
)
from app.services.wellness_import import WellnessImportService
from app.services.wellness_service import WellnessService

router = APIRouter()


@router.post("/readiness", summary="Score a set of wellness ratings without storing them.",
             response_model=ReadinessResult, )
def score_readiness(ratings: WellnessRatings, user: User = Depends(get_current_user), ):
    score, readiness_status = assess_readiness(ratings)
    return ReadinessResult(score=score, status=readiness_status)


@router.get("/squad/readiness", summary="Squad readiness overview for a date.", response_model=SquadReadiness, )
def squad_readiness(date: Optional[datetime.date] = Query(None, description="Day to summarise (defaults to today)"),
                    limit: int = Query(3, ge=1, le=50, description="Max players listed as concerns"),
                    db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    require_permission(user, Permission.VIEW_ALL_PLAYERS)
    service = WellnessService(db)
    return service.squad_readiness(date or datetime.date.today(), limit)


@router.post("/import", summary="Import wellness entries from a CSV file.", response_model=WellnessImportResult, )
def import_wellness(file: UploadFile = File(...), db: Session = Depends(get_db),
                    user: User = Depends(get_current_user), ):
    """Each row is validated on its own; rejected rows are listed in ``errors``."""
    require_permission(user, Permission.EDIT_PLAYER_DATA)
    raw = file.file.read()
    try:
        content = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="CSV file must be UTF-8 encoded") from exc
    return WellnessImportService(db).import_csv(content, user)


@router.patch("/entries/{entry_id}/review", summary="Attach a staff review to an entry.",
              response_model=WellnessEntryResponse, )
def review_entry(entry_id: int, data: WellnessReviewUpdate, db: Session = Depends(get_db),
                 user: User = Depends(get_current_user), ):
    require_permission(user, Permission.ACCESS_MEDICAL_DATA)
    service = WellnessService(db)
    return service.review(entry_id, data, user)


@router.put("/players/{player_id}/entries/{date}", summary="Create or correct a player's entry for a date.",
            response_model=WellnessEntryResponse, )
def upsert_entry(player_id: int, date: datetime.date, data: WellnessEntryCreate, response: Response,
                 db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    """Upsert: creates the entry if it doesn't exist, otherwise merges the submitted fields into it."""
    require_self_or_permission(user, player_id, Permission.EDIT_PLAYER_DATA)
    service = WellnessService(db)
    entry, created = service.upsert(player_id, date, data, user)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("/players/{player_id}/entries", summary="List a player's recent entries.",
            response_model=list[WellnessEntryResponse], )
def list_entries(player_id: int,
                 days: int = Query(30, ge=1, le=365, description="Number of days to look back"),
                 as_of: Optional[datetime.date] = Query(None, description="Last day included (defaults to today)"),
                 db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    require_self_or_permission(user, player_id, Permission.VIEW_ALL_PLAYERS)
    service = WellnessService(db)
    return service.get_recent(player_id, days, as_of)


@router.get("/players/{player_id}/entries/{date}", summary="Get a player's entry for a date.",
            response_model=WellnessEntryResponse, )
def get_entry(player_id: int, date: datetime.date, db: Session = Depends(get_db),
              user: User = Depends(get_current_user), ):
    require_self_or_permission(user, player_id, Permission.VIEW_ALL_PLAYERS)
    service = WellnessService(db)
    return service.get_by_date(player_id, date)


@router.get("/players/{player_id}/trends", summary="Wellness trend over a trailing window.",
            response_model=WellnessTrendResponse, )
def get_trend(player_id: int,
              period: Optional[TrendPeriod] = Query(None, description="7day, 14day or 30day"),
              as_of: Optional[datetime.date] = Query(None, description="Last day of the window (defaults to today)"),
              db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    require_self_or_permission(user, player_id, Permission.VIEW_ALL_PLAYERS)
    service = WellnessService(db)
    return service.trend(player_id, period or settings.TREND_DEFAULT_PERIOD, as_of)
