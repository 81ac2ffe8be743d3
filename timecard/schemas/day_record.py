from datetime import date as Date
from typing import Optional

from pydantic import BaseModel

from timecard.schemas.day_info import DayInfo
from timecard.schemas.overtime import ManualOvertimeEntry
from timecard.schemas.time_entry import TimeEntry


class DayRecord(BaseModel):
    """Everything stored for one calendar day, keyed by its date."""
    date: Date
    entries: list[TimeEntry] = []
    day_info: Optional[DayInfo] = None
    manual_overtime: list[ManualOvertimeEntry] = []
