from datetime import datetime as DateTime
from typing import Optional

from pydantic import BaseModel

from timecard.schemas.time_entry import TimeEntry


class WorkSessionInfo(BaseModel):
    start: DateTime
    end: DateTime
    hours: float
    duration: str               # "HH:MM:SS"
    break_after_hours: Optional[float] = None


class MealVoucherEvaluation(BaseModel):
    eligible: bool
    total_hours: float
    sessions: list[WorkSessionInfo] = []


class MealVoucherRequest(BaseModel):
    entries: list[TimeEntry]
    min_hours: Optional[float] = None         # server default when omitted
    max_break_hours: Optional[float] = None
