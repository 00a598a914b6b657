"""Pydantic schemas for the attendance summary."""

from pydantic import BaseModel, ConfigDict

from .weekly_record import to_camel


class SummaryResponse(BaseModel):
    """Grand totals over every stored week up to today."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_scheduled: int
    total_attended: int


class CurrentWeekResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    week_id: str
    weekday_index: int
