"""
Weekly Record Model for the class timetable and its attendance.

One row per calendar week, keyed by the ISO date of that week's Monday.
The three data fields are JSON documents validated by the schemas in
``class_tracker.schemas.weekly_record`` before they are written.
"""

from sqlalchemy import Column, String, DateTime, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func
import uuid

from class_tracker.core.database import Base

# JSONB on PostgreSQL, plain JSON everywhere else (SQLite in tests)
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class WeeklyRecord(Base):
    """
    Schedule, attendance and extra classes for one week.

    Field formats:
    - schedule: {"headers": ["Day", "8:45-9:40", ...], "rows": [["Monday", "OE", ...], ...]}
    - attendance: {"Monday": {"8:45-9:40": {"status": "present"}}}
    - extra_classes: {"Math": 2}
    """
    __tablename__ = "weekly_records"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    week_id = Column(String, nullable=False, unique=True, index=True)  # "YYYY-MM-DD" of the Monday

    schedule = Column(JSONDocument, nullable=True)
    attendance = Column(JSONDocument, nullable=True)
    extra_classes = Column(JSONDocument, nullable=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<WeeklyRecord(week_id='{self.week_id}')>"
