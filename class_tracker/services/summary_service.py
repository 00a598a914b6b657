"""
Service for the overall attendance summary.

Folds the per-week counts of every stored week up to and including the
current one into grand totals.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from class_tracker.models.weekly_record import WeeklyRecord
from class_tracker.services.attendance_aggregator import WeekTally, aggregate_week
from class_tracker.services.week_calendar_service import week_calendar
from class_tracker.services.weekly_record_service import WeeklyRecordService

logger = logging.getLogger(__name__)


@dataclass
class SummaryTotals:
    total_scheduled: int = 0
    total_attended: int = 0


def summarize(records: Iterable[WeeklyRecord], today: date) -> SummaryTotals:
    """
    Sum scheduled and attended classes over stored weeks.

    Args:
        records: Stored weekly records
        today: The reference date; weeks starting after its Monday are ignored
            and its own week only counts weekdays up to today

    Returns:
        SummaryTotals over all included weeks
    """
    monday_of_current_week = week_calendar.week_start_of(today)
    today_index = week_calendar.weekday_index_of(today)

    total = WeekTally()
    for record in records:
        try:
            week_start = week_calendar.parse_week_id(record.week_id)
        except (TypeError, ValueError):
            logger.warning(f"Skipping record with unparseable week id {record.week_id!r}")
            continue

        # Only process weeks up to and including the current week
        if week_start > monday_of_current_week:
            continue

        is_current_week = week_start == monday_of_current_week
        data = WeeklyRecordService.to_week_data(record)
        total = total + aggregate_week(
            data,
            is_current_week=is_current_week,
            today_index=today_index if is_current_week else None
        )

    return SummaryTotals(total_scheduled=total.scheduled, total_attended=total.attended)


class SummaryService:
    """Summary over the whole store."""

    @staticmethod
    async def get_summary(db: AsyncSession, today: date) -> SummaryTotals:
        all_records = await WeeklyRecordService.list_all(db)
        totals = summarize(all_records, today)
        logger.info(
            f"Summary over {len(all_records)} stored weeks: "
            f"{totals.total_attended}/{totals.total_scheduled}"
        )
        return totals
