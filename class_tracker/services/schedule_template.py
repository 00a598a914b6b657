"""Default timetable served for weeks that have no saved record."""

import copy
from typing import Any, Dict

from class_tracker.schemas.weekly_record import Schedule, WeeklyData

TEA_BREAK = "Tea Break"
LUNCH_BREAK = "Lunch Break"
BREAK_LABELS = frozenset({TEA_BREAK, LUNCH_BREAK})

_DEFAULT_SCHEDULE: Dict[str, Any] = {
    "headers": [
        "Day", "8:45-9:40", "9:40-10:35", "10:35-10:50", "10:50-11:45", "11:45-12:40",
        "12:40-1:40", "1:40-2:35", "2:35-3:30", "3:30-4:25", "4:25-5:20"
    ],
    "rows": [
        ["Monday", "BDA-Lab", "BDA-Lab", TEA_BREAK, "OE", "DL", LUNCH_BREAK, "Project Phase-II", "Project Phase-II", "", ""],
        ["Tuesday", "INS", "DL", TEA_BREAK, "OE", "PC", LUNCH_BREAK, "Project Phase-II", "Project Phase-II", "", ""],
        ["Wednesday", "DL", "BDA", TEA_BREAK, "OE", "INS", LUNCH_BREAK, "STEIGEN", "STEIGEN", "", ""],
        ["Thursday", "INS", "PC", TEA_BREAK, "BDA", "PC", LUNCH_BREAK, "SOFTSKILL", "SOFTSKILL", "", ""],
        ["Friday", "INS", "BDA", TEA_BREAK, "PC-Lab", "PC-Lab", LUNCH_BREAK, "Project Phase-II", "Project Phase-II", "", ""],
    ]
}


def default_schedule() -> Schedule:
    """A fresh copy of the default timetable."""
    return Schedule.model_validate(copy.deepcopy(_DEFAULT_SCHEDULE))


def default_week_data() -> WeeklyData:
    """The view returned for a week nobody has saved yet."""
    return WeeklyData(schedule=default_schedule(), attendance={}, extra_classes={})
