"""Tests für Statuscode-Verbrauch und Restansprüche."""
from datetime import date

import pytest

from timecard.schemas.day_info import DayInfo
from timecard.schemas.day_record import DayRecord
from timecard.schemas.leave_balance import StatusItem
from timecard.schemas.overtime import ManualOvertimeEntry
from timecard.services.leave_balance_service import (
    calculate_balances,
    calculate_monthly_status_usage,
    calculate_status_usage,
    status_code_for,
)
from tests.conftest import hours, minutes

STATUS_ITEMS = [
    StatusItem(code=15, description="Ferie", year=2024, category="leave-day", entitlement=26),
    StatusItem(code=8, description="Permesso ore", year=2024, category="leave-hours", entitlement=36),
    StatusItem(code=2041, description="Corso", year=2024, category="overtime"),
    StatusItem(code=2000, description="Straordinario", year=2024, category="overtime"),
    StatusItem(code=3001, description="Banca ore", year=2024, category="balance", entitlement=10, item_class="ACC"),
]


def leave_day(d: date, leave_type: str, leave_hours: float | None = None) -> DayRecord:
    return DayRecord(date=d, day_info=DayInfo.for_leave(leave_type, hours=leave_hours))


def overtime_day(d: date, overtime_type: str, duration_ms: int) -> DayRecord:
    return DayRecord(
        date=d,
        manual_overtime=[ManualOvertimeEntry(id=f"m-{d}", duration_ms=duration_ms, type=overtime_type)],
    )


RECORDS = [
    leave_day(date(2024, 1, 8), "code-15"),
    leave_day(date(2024, 3, 4), "vacation"),
    leave_day(date(2024, 3, 5), "code-8", 2.5),
    overtime_day(date(2024, 3, 6), "code-2041", hours(2)),
    overtime_day(date(2024, 4, 2), "code-2041", minutes(30)),
    leave_day(date(2023, 12, 29), "code-15"),      # anderes Jahr
    leave_day(date(2024, 5, 6), "code-99"),        # unbekannter Code
]


@pytest.mark.parametrize("leave_type, code", [
    ("code-15", 15),
    (" code-2041 ", 2041),
    ("vacation", 15),
    ("comp-time", 8),
    ("holiday", 10),
    ("medical", 32),
    ("code-x", None),
    ("sabbatical", None),
])
def test_status_code_for(leave_type, code):
    assert status_code_for(leave_type) == code


def test_usage_per_code():
    usage = calculate_status_usage(RECORDS, 2024, STATUS_ITEMS)
    assert usage == {15: 2, 8: 2.5, 2041: 2.5}


def test_overtime_matched_by_description():
    usage = calculate_status_usage([overtime_day(date(2024, 2, 1), "Straordinario", hours(3))], 2024, STATUS_ITEMS)
    assert usage == {2000: 3.0}


def test_negative_overtime_keeps_its_sign():
    records = [
        overtime_day(date(2024, 2, 1), "code-3001", hours(6)),
        overtime_day(date(2024, 2, 2), "code-3001", -hours(4)),
    ]
    usage = calculate_status_usage(records, 2024, STATUS_ITEMS)
    assert usage == {3001: 2.0}
    balance = next(b for b in calculate_balances(usage, STATUS_ITEMS) if b.code == 3001)
    assert balance.remaining == 12


def test_monthly_usage():
    monthly = calculate_monthly_status_usage(RECORDS, 2024, 2041, STATUS_ITEMS)
    assert len(monthly) == 12
    assert monthly[2] == 2.0
    assert monthly[3] == 0.5
    assert sum(monthly) == 2.5


def test_monthly_usage_unknown_code_is_zero():
    assert calculate_monthly_status_usage(RECORDS, 2024, 99, STATUS_ITEMS) == [0.0] * 12


def test_balances():
    usage = {15: 2, 8: 2.5, 3001: 4}
    balances = {b.code: b for b in calculate_balances(usage, STATUS_ITEMS)}
    assert balances[15].remaining == 24
    assert balances[8].used == 2.5
    assert balances[8].remaining == 33.5
    assert balances[2041].used == 0
    # Zeitkonto (ACC): Verbrauch erhöht den Saldo
    assert balances[3001].remaining == 14
