"""
API endpoints for reading and saving one week of timetable data.

- GET  /data?weekId=YYYY-MM-DD  stored record, or the default timetable
- POST /data                    full replace of a week's record
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from class_tracker.core.database import get_db
from class_tracker.core.exceptions import ValidationError
from class_tracker.services.weekly_record_service import WeeklyRecordService
from class_tracker.schemas.weekly_record import (
    WeeklyDataSave,
    WeeklyDataResponse,
    SaveResponse
)

router = APIRouter(prefix="/data", tags=["Weekly Data"])

WEEK_ID_REQUIRED = "weekId is required"


@router.get("", response_model=WeeklyDataResponse)
async def get_weekly_data(
    week_id: Optional[str] = Query(None, alias="weekId", description="ISO date of the week's Monday"),
    db: AsyncSession = Depends(get_db)
):
    """
    Get a week's schedule, attendance and extra classes.

    Weeks without a saved record get the default timetable with empty
    attendance and extra classes; nothing is written.
    """
    if not week_id:
        raise ValidationError(WEEK_ID_REQUIRED)

    data = await WeeklyRecordService.get_week_data(db, week_id)
    return WeeklyDataResponse(week_id=week_id, **data.model_dump())


@router.post("", response_model=SaveResponse)
async def save_weekly_data(
    data: WeeklyDataSave,
    db: AsyncSession = Depends(get_db)
):
    """Create or replace the record for ``weekId``."""
    if not data.week_id:
        raise ValidationError(WEEK_ID_REQUIRED)

    await WeeklyRecordService.save_week_data(db, data.week_id, data)

    return SaveResponse(message="Data saved successfully", week_id=data.week_id)
