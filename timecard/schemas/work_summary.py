from datetime import date as Date, datetime as DateTime
from typing import Optional

from pydantic import BaseModel

from timecard.schemas.day_info import DayInfo
from timecard.schemas.overtime import ManualOvertimeEntry
from timecard.schemas.time_entry import TimeEntry
from timecard.schemas.work_settings import WorkSettings

BUCKET_FIELDS = (
    "total_work_ms",
    "standard_work_ms",
    "excess_hours_ms",
    "overtime_diurnal_ms",
    "overtime_nocturnal_ms",
    "overtime_holiday_ms",
    "overtime_nocturnal_holiday_ms",
    "null_hours_ms",
)


class WorkDaySummary(BaseModel):
    total_work_ms: int = 0
    standard_work_ms: int = 0
    excess_hours_ms: int = 0
    overtime_diurnal_ms: int = 0
    overtime_nocturnal_ms: int = 0
    overtime_holiday_ms: int = 0
    overtime_nocturnal_holiday_ms: int = 0
    null_hours_ms: int = 0

    @property
    def overtime_ms(self) -> int:
        return (
            self.overtime_diurnal_ms
            + self.overtime_nocturnal_ms
            + self.overtime_holiday_ms
            + self.overtime_nocturnal_holiday_ms
        )

    @property
    def payable_ms(self) -> int:
        """Sum of the payable buckets; equals total_work_ms for engine output."""
        return self.standard_work_ms + self.excess_hours_ms + self.overtime_ms

    def add(self, other: "WorkDaySummary") -> None:
        for name in BUCKET_FIELDS:
            setattr(self, name, getattr(self, name) + getattr(other, name))


class WorkIntervalSummary(WorkDaySummary):
    start: DateTime
    end: DateTime
    closing_entry_id: Optional[str] = None


class WorkSummaryResult(BaseModel):
    summary: WorkDaySummary
    intervals: list[WorkIntervalSummary] = []


class WorkSummaryRequest(BaseModel):
    date: Date
    entries: list[TimeEntry] = []
    settings: Optional[WorkSettings] = None   # server defaults when omitted
    day_info: Optional[DayInfo] = None
    next_day_info: Optional[DayInfo] = None
    manual_overtime: list[ManualOvertimeEntry] = []
