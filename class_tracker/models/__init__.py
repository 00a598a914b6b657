# Models package
from .weekly_record import WeeklyRecord
