# Schemas package
from .weekly_record import (
    AttendanceStatus, SlotAttendance, AttendanceMap, ExtraClassMap, Schedule,
    WeeklyData, WeeklyDataSave, WeeklyDataResponse, SaveResponse
)
from .summary import SummaryResponse, CurrentWeekResponse
