"""Weekly class timetable and attendance tracking service."""
