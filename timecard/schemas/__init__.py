from timecard.schemas.time_entry import TimeEntry
from timecard.schemas.day_info import DayInfo, DayPlan, Unplanned, ShiftAssignment, LeaveAssignment
from timecard.schemas.day_record import DayRecord
from timecard.schemas.overtime import ManualOvertimeEntry
from timecard.schemas.work_settings import Shift, WorkSettings
from timecard.schemas.work_summary import WorkDaySummary, WorkIntervalSummary, WorkSummaryResult, WorkSummaryRequest
from timecard.schemas.meal_voucher import WorkSessionInfo, MealVoucherEvaluation, MealVoucherRequest
from timecard.schemas.leave_balance import StatusItem, StatusBalance, LeaveUsageRequest, LeaveUsageOut
from timecard.schemas.stats import (
    MonthlyStats, MonthDelta, MonthComparison, MonthlyStatsRequest, MonthComparisonRequest,
    YearDelta, YearComparison, YearlyTrendRequest, YearComparisonRequest,
)
from timecard.schemas.reminder import ReminderOut, ReminderPlanRequest

__all__ = [
    "TimeEntry",
    "DayInfo", "DayPlan", "Unplanned", "ShiftAssignment", "LeaveAssignment",
    "DayRecord",
    "ManualOvertimeEntry",
    "Shift", "WorkSettings",
    "WorkDaySummary", "WorkIntervalSummary", "WorkSummaryResult", "WorkSummaryRequest",
    "WorkSessionInfo", "MealVoucherEvaluation", "MealVoucherRequest",
    "StatusItem", "StatusBalance", "LeaveUsageRequest", "LeaveUsageOut",
    "MonthlyStats", "MonthDelta", "MonthComparison", "MonthlyStatsRequest", "MonthComparisonRequest",
    "YearDelta", "YearComparison", "YearlyTrendRequest", "YearComparisonRequest",
    "ReminderOut", "ReminderPlanRequest",
]
