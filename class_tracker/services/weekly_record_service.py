"""
Service for storing and reading weekly timetable records.

This service handles:
- Keyed lookup of a week's record
- Upsert (full replace of schedule, attendance and extra classes)
- Listing every stored week for the summary
- The default view for weeks without a record
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from class_tracker.core.exceptions import StoreError
from class_tracker.models.weekly_record import WeeklyRecord
from class_tracker.schemas.weekly_record import WeeklyData
from class_tracker.services.schedule_template import default_week_data

logger = logging.getLogger(__name__)


class WeeklyRecordService:
    """Persistence of one record per week identifier."""

    @staticmethod
    async def get(db: AsyncSession, week_id: str) -> Optional[WeeklyRecord]:
        """Get the stored record for a week, or None."""
        try:
            result = await db.execute(
                select(WeeklyRecord).where(WeeklyRecord.week_id == week_id)
            )
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching week {week_id}: {e}")
            raise StoreError("Server error fetching weekly data", e) from e

    @staticmethod
    async def upsert(db: AsyncSession, week_id: str, data: WeeklyData) -> WeeklyRecord:
        """
        Create or replace the record for a week.

        The three data fields are replaced wholesale; nothing is merged with
        what was stored before.
        """
        document = data.to_document()
        try:
            existing = await db.execute(
                select(WeeklyRecord).where(WeeklyRecord.week_id == week_id)
            )
            record = existing.scalars().first()

            if record:
                record.schedule = document["schedule"]
                record.attendance = document["attendance"]
                record.extra_classes = document["extra_classes"]
            else:
                record = WeeklyRecord(
                    week_id=week_id,
                    schedule=document["schedule"],
                    attendance=document["attendance"],
                    extra_classes=document["extra_classes"]
                )
                db.add(record)

            await db.commit()
            await db.refresh(record)
            return record
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error saving week {week_id}: {e}")
            raise StoreError("Server error saving data", e) from e

    @staticmethod
    async def list_all(db: AsyncSession) -> List[WeeklyRecord]:
        """Get every stored record, ordered by week."""
        try:
            result = await db.execute(
                select(WeeklyRecord).order_by(WeeklyRecord.week_id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing weekly records: {e}")
            raise StoreError("Server error fetching summary data", e) from e

    @staticmethod
    def to_week_data(record: WeeklyRecord) -> WeeklyData:
        return WeeklyData(
            schedule=record.schedule,
            attendance=record.attendance,
            extra_classes=record.extra_classes
        )

    @staticmethod
    async def get_week_data(db: AsyncSession, week_id: str) -> WeeklyData:
        """Get a week's data, or the default timetable if nothing is saved."""
        record = await WeeklyRecordService.get(db, week_id)
        if not record:
            return default_week_data()
        return WeeklyRecordService.to_week_data(record)

    @staticmethod
    async def save_week_data(db: AsyncSession, week_id: str, data: WeeklyData) -> WeeklyRecord:
        record = await WeeklyRecordService.upsert(db, week_id, data)
        logger.info(f"Saved week {week_id}")
        return record
