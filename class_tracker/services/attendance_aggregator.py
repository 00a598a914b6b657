"""
Per-week attendance counting.

Turns one week's schedule grid, slot attendance and extra classes into
scheduled/attended counts:
- Empty cells and break cells never count
- A run of identical consecutive labels is one class, decided by its first slot
- Cancelled classes are neither scheduled nor attended
- A class with no attendance entry is scheduled but not attended
- Extra classes add to attended only, and only for weeks that have a grid
"""

from dataclasses import dataclass
from typing import List, Optional

from class_tracker.schemas.weekly_record import AttendanceMap, AttendanceStatus, WeeklyData
from class_tracker.services.schedule_template import BREAK_LABELS
from class_tracker.services.week_calendar_service import week_calendar


@dataclass
class WeekTally:
    scheduled: int = 0
    attended: int = 0

    def __add__(self, other: "WeekTally") -> "WeekTally":
        return WeekTally(
            scheduled=self.scheduled + other.scheduled,
            attended=self.attended + other.attended
        )


def _slot_status(attendance: AttendanceMap, day_name: str, time_slot: Optional[str]) -> AttendanceStatus:
    if time_slot is None:
        return AttendanceStatus.UNSET
    slot = attendance.get(day_name, {}).get(time_slot)
    if slot is None:
        return AttendanceStatus.UNSET
    return slot.status


def _count_row(headers: List[str], row: List[str], attendance: AttendanceMap) -> WeekTally:
    tally = WeekTally()
    if not row:
        return tally

    day_name = row[0]
    class_items = row[1:]

    time_index = 0
    while time_index < len(class_items):
        item = class_items[time_index]
        if not item or item in BREAK_LABELS:
            time_index += 1
            continue

        header_index = time_index + 1
        time_slot = headers[header_index] if header_index < len(headers) else None
        status = _slot_status(attendance, day_name, time_slot)

        if status != AttendanceStatus.CANCELLED:
            tally.scheduled += 1
            if status == AttendanceStatus.PRESENT:
                tally.attended += 1

        # Multi-slot classes: skip the rest of the run
        span = 1
        while time_index + span < len(class_items) and class_items[time_index + span] == item:
            span += 1
        time_index += span

    return tally


def aggregate_week(
    data: WeeklyData,
    is_current_week: bool = False,
    today_index: Optional[int] = None
) -> WeekTally:
    """
    Count scheduled and attended classes for one week.

    Args:
        data: The week's schedule, attendance and extra classes
        is_current_week: Whether the week contains today
        today_index: Today's weekday index (Mon=1 ... Sun=7); used only for the
            current week, where rows for later weekdays are not yet due

    Returns:
        WeekTally with the week's counts
    """
    schedule = data.schedule
    if schedule is None or not schedule.rows:
        # Weeks without a grid contribute nothing, extra classes included
        return WeekTally()

    tally = WeekTally()
    for row in schedule.rows:
        if is_current_week and today_index is not None and row:
            row_index = week_calendar.weekday_index_of_name(row[0])
            if row_index is not None and row_index > today_index:
                continue
        tally = tally + _count_row(schedule.headers, row, data.attendance)

    tally.attended += sum(data.extra_classes.values())
    return tally
