import pytest
from pydantic import ValidationError

from class_tracker.schemas.weekly_record import AttendanceStatus, Schedule, WeeklyData, WeeklyDataSave


def test_extra_class_counts_are_coerced():
    data = WeeklyData(extra_classes={"Math": 2, "Physics": "lots", "Chem": None, "Bio": 1.0, "Art": True})
    assert data.extra_classes == {"Math": 2, "Physics": 0, "Chem": 0, "Bio": 1, "Art": 0}


def test_missing_status_is_unset():
    data = WeeklyData(attendance={"Monday": {"8:45-9:40": {}, "9:40-10:35": {"status": None}}})
    assert data.attendance["Monday"]["8:45-9:40"].status == AttendanceStatus.UNSET
    assert data.attendance["Monday"]["9:40-10:35"].status == AttendanceStatus.UNSET


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError):
        WeeklyData(attendance={"Monday": {"8:45-9:40": {"status": "late"}}})


def test_null_fields_become_empty():
    data = WeeklyData(schedule=None, attendance=None, extra_classes=None)
    assert data.schedule is None
    assert data.attendance == {}
    assert data.extra_classes == {}


def test_null_cells_become_empty_strings():
    schedule = Schedule(headers=["Day", "8:45-9:40"], rows=[["Monday", None]])
    assert schedule.rows == [["Monday", ""]]


def test_save_body_uses_camel_case():
    body = WeeklyDataSave.model_validate({"weekId": "2026-10-12", "extraClasses": {"Math": 1}})
    assert body.week_id == "2026-10-12"
    assert body.extra_classes == {"Math": 1}


def test_document_keeps_slot_extras():
    data = WeeklyData(attendance={"Monday": {"8:45-9:40": {"status": "present", "note": "lab"}}})
    document = data.to_document()
    assert document["attendance"] == {"Monday": {"8:45-9:40": {"status": "present", "note": "lab"}}}
    assert set(document) == {"schedule", "attendance", "extra_classes"}
