from typing import Optional

from pydantic import BaseModel

from timecard.schemas.day_record import DayRecord
from timecard.schemas.work_settings import WorkSettings
from timecard.schemas.work_summary import WorkDaySummary


class MonthlyStats(BaseModel):
    month: str              # YYYY-MM
    year: int
    total_hours: float
    total_hours_display: str    # "HH:MM"
    work_days: int
    average_hours_per_day: float
    overtime_hours: float
    excess_hours: float
    productivity: float     # % of work_days × standard_day_hours
    summary: WorkDaySummary


class MonthDelta(BaseModel):
    total_hours: float
    work_days: int
    average_hours_per_day: float
    overtime_hours: float
    productivity: float


class MonthComparison(BaseModel):
    current: MonthlyStats
    previous: MonthlyStats
    delta: MonthDelta


class MonthlyStatsRequest(BaseModel):
    year: int
    month: int              # 1–12
    days: list[DayRecord] = []
    settings: Optional[WorkSettings] = None


class MonthComparisonRequest(BaseModel):
    year: int
    month: int
    previous_year: int
    previous_month: int
    days: list[DayRecord] = []
    settings: Optional[WorkSettings] = None


class YearDelta(BaseModel):
    total_hours: float
    total_work_days: int
    total_overtime: float
    average_productivity: float     # over months with at least one work day


class YearComparison(BaseModel):
    current: list[MonthlyStats]     # January first
    previous: list[MonthlyStats]
    delta: YearDelta


class YearlyTrendRequest(BaseModel):
    year: int
    days: list[DayRecord] = []
    settings: Optional[WorkSettings] = None


class YearComparisonRequest(BaseModel):
    year: int
    previous_year: int
    days: list[DayRecord] = []
    settings: Optional[WorkSettings] = None
