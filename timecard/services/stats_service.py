"""
Monthly statistics built on the day calculation.
"""
import calendar
from datetime import date, timedelta
from typing import Iterable

from timecard.schemas.day_record import DayRecord
from timecard.schemas.stats import MonthComparison, MonthDelta, MonthlyStats, YearComparison, YearDelta
from timecard.schemas.work_summary import WorkDaySummary
from timecard.services.work_summary_service import WorkSummaryCalculator
from timecard.utils.durations import MS_PER_HOUR, format_hours_decimal, ms_to_hours


class StatsService:

    def __init__(self, calculator: WorkSummaryCalculator):
        self.calculator = calculator

    def calculate_monthly_stats(
        self, year: int, month: int, records: Iterable[DayRecord]
    ) -> MonthlyStats:
        by_date = {r.date: r for r in records}
        _, days_in_month = calendar.monthrange(year, month)

        total = WorkDaySummary()
        work_days = 0

        for day_number in range(1, days_in_month + 1):
            day = date(year, month, day_number)
            record = by_date.get(day)
            if record is None:
                continue
            next_record = by_date.get(day + timedelta(days=1))

            result = self.calculator.calculate(
                day,
                record.entries,
                record.day_info,
                next_record.day_info if next_record else None,
                record.manual_overtime,
            )
            if result.intervals or result.summary.total_work_ms > 0:
                work_days += 1
            total.add(result.summary)

        total_hours = total.total_work_ms / MS_PER_HOUR
        expected_hours = work_days * max(0.0, self.calculator.settings.standard_day_hours)

        return MonthlyStats(
            month=f"{year}-{month:02d}",
            year=year,
            total_hours=round(total_hours, 2),
            total_hours_display=format_hours_decimal(total_hours),
            work_days=work_days,
            average_hours_per_day=round(total_hours / work_days, 2) if work_days else 0.0,
            overtime_hours=ms_to_hours(total.overtime_ms),
            excess_hours=ms_to_hours(total.excess_hours_ms),
            productivity=round(total_hours / expected_hours * 100, 2) if expected_hours > 0 else 0.0,
            summary=total,
        )

    def compare_months(
        self,
        year: int,
        month: int,
        previous_year: int,
        previous_month: int,
        records: Iterable[DayRecord],
    ) -> MonthComparison:
        records = list(records)
        current = self.calculate_monthly_stats(year, month, records)
        previous = self.calculate_monthly_stats(previous_year, previous_month, records)
        return MonthComparison(
            current=current,
            previous=previous,
            delta=MonthDelta(
                total_hours=round(current.total_hours - previous.total_hours, 2),
                work_days=current.work_days - previous.work_days,
                average_hours_per_day=round(current.average_hours_per_day - previous.average_hours_per_day, 2),
                overtime_hours=round(current.overtime_hours - previous.overtime_hours, 2),
                productivity=round(current.productivity - previous.productivity, 2),
            ),
        )

    def calculate_yearly_trend(self, year: int, records: Iterable[DayRecord]) -> list[MonthlyStats]:
        """Twelve MonthlyStats, January first."""
        records = list(records)
        return [self.calculate_monthly_stats(year, month, records) for month in range(1, 13)]

    def compare_years(
        self, year: int, previous_year: int, records: Iterable[DayRecord]
    ) -> YearComparison:
        records = list(records)
        current = self.calculate_yearly_trend(year, records)
        previous = self.calculate_yearly_trend(previous_year, records)
        return YearComparison(
            current=current,
            previous=previous,
            delta=YearDelta(
                total_hours=round(_sum(current, "total_hours") - _sum(previous, "total_hours"), 2),
                total_work_days=sum(m.work_days for m in current) - sum(m.work_days for m in previous),
                total_overtime=round(_sum(current, "overtime_hours") - _sum(previous, "overtime_hours"), 2),
                average_productivity=round(
                    _average_productivity(current) - _average_productivity(previous), 2
                ),
            ),
        )


def _sum(months: list[MonthlyStats], field: str) -> float:
    return sum(getattr(m, field) for m in months)


def _average_productivity(months: list[MonthlyStats]) -> float:
    # Monate ohne Arbeitstage zählen nicht mit
    months_with_data = sum(1 for m in months if m.work_days > 0)
    return _sum(months, "productivity") / max(months_with_data, 1)
