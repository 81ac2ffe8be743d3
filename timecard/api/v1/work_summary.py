"""
Work summary API – day breakdown and monthly statistics
"""
from fastapi import APIRouter, HTTPException, status

from timecard.api.deps import DefaultWorkSettings
from timecard.schemas.stats import (
    MonthComparison,
    MonthComparisonRequest,
    MonthlyStats,
    MonthlyStatsRequest,
    YearComparison,
    YearComparisonRequest,
    YearlyTrendRequest,
)
from timecard.schemas.work_settings import WorkSettings
from timecard.schemas.work_summary import WorkSummaryRequest, WorkSummaryResult
from timecard.services.stats_service import StatsService
from timecard.services.work_summary_service import WorkSummaryCalculator, calculate_work_summary

router = APIRouter(prefix="/work-summary", tags=["work-summary"])


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid month: {month} (expected 1–12)",
        )


@router.get("/default-settings", response_model=WorkSettings)
async def get_default_settings(defaults: DefaultWorkSettings):
    return defaults


@router.post("/calculate", response_model=WorkSummaryResult)
async def calculate_day(payload: WorkSummaryRequest, defaults: DefaultWorkSettings):
    """
    Split one day's punches into standard, excess, null and overtime time.
    Manual overtime entries are added to the bucket they declare.
    """
    return calculate_work_summary(
        payload.date,
        payload.entries,
        payload.settings or defaults,
        payload.day_info,
        payload.next_day_info,
        payload.manual_overtime,
    )


@router.post("/monthly", response_model=MonthlyStats)
async def monthly_stats(payload: MonthlyStatsRequest, defaults: DefaultWorkSettings):
    _check_month(payload.month)
    service = StatsService(WorkSummaryCalculator(payload.settings or defaults))
    return service.calculate_monthly_stats(payload.year, payload.month, payload.days)


@router.post("/compare", response_model=MonthComparison)
async def compare_months(payload: MonthComparisonRequest, defaults: DefaultWorkSettings):
    """Compare a month with another (usually the previous one)."""
    _check_month(payload.month)
    _check_month(payload.previous_month)
    service = StatsService(WorkSummaryCalculator(payload.settings or defaults))
    return service.compare_months(
        payload.year,
        payload.month,
        payload.previous_year,
        payload.previous_month,
        payload.days,
    )


@router.post("/yearly", response_model=list[MonthlyStats])
async def yearly_trend(payload: YearlyTrendRequest, defaults: DefaultWorkSettings):
    """Monthly statistics for all twelve months of a year."""
    service = StatsService(WorkSummaryCalculator(payload.settings or defaults))
    return service.calculate_yearly_trend(payload.year, payload.days)


@router.post("/compare-years", response_model=YearComparison)
async def compare_years(payload: YearComparisonRequest, defaults: DefaultWorkSettings):
    service = StatsService(WorkSummaryCalculator(payload.settings or defaults))
    return service.compare_years(payload.year, payload.previous_year, payload.days)
