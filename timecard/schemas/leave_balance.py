from typing import Literal

from pydantic import BaseModel

from timecard.schemas.day_record import DayRecord

StatusCategory = Literal["leave-day", "leave-hours", "overtime", "balance", "info"]


class StatusItem(BaseModel):
    code: int
    description: str
    year: int
    category: StatusCategory
    entitlement: float = 0
    item_class: str = ""    # "ACC" = accrual: usage adds to the balance


class StatusBalance(BaseModel):
    code: int
    description: str
    category: StatusCategory
    entitlement: float
    used: float
    remaining: float


class LeaveUsageRequest(BaseModel):
    year: int
    status_items: list[StatusItem]
    days: list[DayRecord] = []


class LeaveUsageOut(BaseModel):
    year: int
    usage: dict[int, float]
    balances: list[StatusBalance]
