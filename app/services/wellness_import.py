"""
Wellness CSV import.

Maps the columns of a wellness spreadsheet export onto
:class:`WellnessEntryCreate` and upserts one entry per row.  Column names
are matched case-insensitively and accept both ``snake_case`` and the
``camelCase`` names used by the squad's existing spreadsheets.

Rows are validated independently: a bad row is reported in the result and
skipped, the rest are still imported.
"""

import csv
import datetime
import io
from typing import Optional

from fastapi import HTTPException
from pydantic import ValidationError
from sqlmodel import Session

from app.core.logging import get_logger
from app.models.user import User
from app.schemas.wellness import ImportRowError, WellnessEntryCreate, WellnessImportResult
from app.services.wellness_service import WellnessService

logger = get_logger(__name__)

# Accepted header (lower-cased) -> schema field.
COLUMN_ALIASES: dict[str, str] = {
    "player_id": "player_id",
    "playerid": "player_id",
    "date": "date",
    "sleep_quality": "sleep_quality",
    "sleepquality": "sleep_quality",
    "sleep_hours": "sleep_hours",
    "sleephours": "sleep_hours",
    "muscle_soreness": "muscle_soreness",
    "musclesoreness": "muscle_soreness",
    "fatigue_level": "fatigue_level",
    "fatiguelevel": "fatigue_level",
    "stress_level": "stress_level",
    "stresslevel": "stress_level",
    "mood": "mood",
    "nutrition_adherence": "nutrition_adherence",
    "nutritionadherence": "nutrition_adherence",
    "session_rpe": "session_rpe",
    "sessionrpe": "session_rpe",
    "soreness_areas": "soreness_areas",
    "sorenessareas": "soreness_areas",
}

REQUIRED_COLUMNS = ("player_id", "date")


def _map_header(fieldnames: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for name in fieldnames:
        key = name.strip().lower()
        if key in COLUMN_ALIASES:
            mapping[name] = COLUMN_ALIASES[key]
    return mapping


def _row_to_fields(row: dict[str, Optional[str]], header: dict[str, str]) -> dict:
    fields: dict = {}
    for column, field in header.items():
        raw = (row.get(column) or "").strip()
        if not raw:
            continue
        if field == "soreness_areas":
            fields[field] = [area.strip() for area in raw.replace(";", ",").split(",") if area.strip()]
        else:
            fields[field] = raw
    return fields


class WellnessImportService:
    """Imports wellness entries from CSV text."""

    def __init__(self, session: Session):
        self.wellness = WellnessService(session)

    def import_csv(self, content: str, imported_by: User) -> WellnessImportResult:
        result = WellnessImportResult()
        reader = csv.DictReader(io.StringIO(content))
        header = _map_header(reader.fieldnames or [])

        missing = [c for c in REQUIRED_COLUMNS if c not in header.values()]
        if missing:
            result.errors.append(ImportRowError(row=0, message=f"Missing required columns: {', '.join(missing)}"))
            return result

        for row in reader:
            # Physical line of the record, header excluded; blank lines still count.
            row_number = reader.line_num - 1
            fields = _row_to_fields(row, header)
            try:
                player_id = int(fields.pop("player_id", ""))
                date = datetime.date.fromisoformat(fields.pop("date", ""))
            except ValueError:
                result.errors.append(ImportRowError(row=row_number, message="Invalid or missing player_id/date"))
                continue

            try:
                data = WellnessEntryCreate(**fields)
            except ValidationError as exc:
                problems = "; ".join(
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
                )
                result.errors.append(ImportRowError(row=row_number, message=problems))
                continue

            try:
                _, created = self.wellness.upsert(player_id, date, data, imported_by, entry_method="imported")
            except HTTPException as exc:
                result.errors.append(ImportRowError(row=row_number, message=str(exc.detail)))
                continue

            if created:
                result.created += 1
            else:
                result.updated += 1

        logger.info("Wellness import by %s: %d created, %d updated, %d rejected",
                    imported_by.id, result.created, result.updated, len(result.errors))
        return result
