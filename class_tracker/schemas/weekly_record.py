"""
Pydantic schemas for weekly timetable records.

Includes schemas for:
- The schedule grid (headers + per-weekday rows)
- Per-slot attendance records
- Extra classes logged outside the grid
- Request/response bodies of the data endpoints
"""

import math
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split('_')
    return components[0] + ''.join(x.title() for x in components[1:])


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    CANCELLED = "cancelled"
    UNSET = "unset"


class SlotAttendance(BaseModel):
    """Attendance for one time slot. Unknown keys are kept as-is."""
    model_config = ConfigDict(extra="allow")

    status: AttendanceStatus = AttendanceStatus.UNSET

    @field_validator("status", mode="before")
    @classmethod
    def empty_status_is_unset(cls, value):
        if value is None or value == "":
            return AttendanceStatus.UNSET
        return value


# weekday name -> time-slot label -> slot record
AttendanceMap = Dict[str, Dict[str, SlotAttendance]]

# subject -> number of extra sessions attended
ExtraClassMap = Dict[str, int]


class Schedule(BaseModel):
    """Timetable grid. headers[0] labels the weekday column ("Day")."""
    headers: List[str] = Field(default_factory=list)
    rows: List[List[str]] = Field(default_factory=list)

    @field_validator("rows", mode="before")
    @classmethod
    def null_cells_are_empty(cls, value):
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        return [
            ["" if cell is None else cell for cell in row] if isinstance(row, list) else row
            for row in value
        ]


def _count_value(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return 0


class WeeklyData(BaseModel):
    """The three fields stored for each week."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    schedule: Optional[Schedule] = None
    attendance: AttendanceMap = Field(default_factory=dict)
    extra_classes: ExtraClassMap = Field(default_factory=dict)

    @field_validator("attendance", mode="before")
    @classmethod
    def null_attendance_is_empty(cls, value):
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        return {day: slots or {} for day, slots in value.items()}

    @field_validator("extra_classes", mode="before")
    @classmethod
    def coerce_extra_class_counts(cls, value):
        # Non-numeric counts contribute nothing
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        return {subject: _count_value(count) for subject, count in value.items()}

    def to_document(self) -> Dict[str, Any]:
        """JSON-ready fields keyed by column name."""
        return self.model_dump(mode="json", include={"schedule", "attendance", "extra_classes"})


class WeeklyDataSave(WeeklyData):
    """Body of POST /data. weekId is checked by the endpoint, not here."""
    week_id: Optional[str] = None


class WeeklyDataResponse(WeeklyData):
    """Body of GET /data."""
    week_id: str


class SaveResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    week_id: str
