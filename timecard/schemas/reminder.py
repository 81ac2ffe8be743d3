from datetime import date as Date, datetime as DateTime
from typing import Literal, Optional

from pydantic import BaseModel

from timecard.schemas.day_info import DayInfo
from timecard.schemas.work_settings import WorkSettings


class ReminderOut(BaseModel):
    kind: Literal["clock-in", "clock-out"]
    at: DateTime
    title: str
    body: str

    model_config = {"from_attributes": True}


class ReminderPlanRequest(BaseModel):
    date: Date
    day_info: Optional[DayInfo] = None
    settings: Optional[WorkSettings] = None   # server defaults when omitted
