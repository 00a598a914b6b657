from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from class_tracker.api.deps import get_today
from class_tracker.core.database import get_db
from class_tracker.services.summary_service import SummaryService
from class_tracker.services.week_calendar_service import week_calendar
from class_tracker.schemas.summary import SummaryResponse, CurrentWeekResponse

router = APIRouter()


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db)
):
    """
    Get scheduled and attended totals over all stored weeks.

    Future weeks are ignored; the current week only counts days up to today.
    Extra classes count towards attended only.
    """
    totals = await SummaryService.get_summary(db, today)
    return SummaryResponse(
        total_scheduled=totals.total_scheduled,
        total_attended=totals.total_attended
    )


@router.get("/current-week", response_model=CurrentWeekResponse)
async def get_current_week(today: date = Depends(get_today)):
    """Get the week identifier and weekday index for today."""
    return CurrentWeekResponse(
        week_id=week_calendar.week_id_of(today),
        weekday_index=week_calendar.weekday_index_of(today)
    )
