"""
Leave and status-code usage per year.

Leave days typed ``code-N`` count one day (leave-day items) or their hours
(leave-hours items) against status code N. Manual overtime typed ``code-N``
counts its hours against N; other manual types are matched to an overtime
item by description.
"""
from typing import Iterable

from timecard.schemas.day_record import DayRecord
from timecard.schemas.leave_balance import StatusBalance, StatusItem
from timecard.schemas.overtime import STATUS_CODE_PREFIX
from timecard.utils.durations import MS_PER_HOUR

ACCRUAL_CLASS = "ACC"

# Alte, fest verdrahtete Abwesenheitsarten → Statuscode
LEGACY_LEAVE_CODES = {
    "vacation":  15,
    "comp-time": 8,
    "holiday":   10,
    "medical":   32,
}


def status_code_for(leave_type: str) -> int | None:
    """``code-15`` → 15, legacy names via LEGACY_LEAVE_CODES, anything else None."""
    value = (leave_type or "").strip()
    if value.startswith(STATUS_CODE_PREFIX):
        try:
            return int(value[len(STATUS_CODE_PREFIX):])
        except ValueError:
            return None
    return LEGACY_LEAVE_CODES.get(value)


def _overtime_item_for(overtime_type: str, status_items: list[StatusItem]) -> StatusItem | None:
    value = (overtime_type or "").strip()
    if value.startswith(STATUS_CODE_PREFIX):
        code = status_code_for(value)
        return next((i for i in status_items if i.code == code), None)
    return next(
        (i for i in status_items if i.category == "overtime" and i.description.strip() == value),
        None,
    )


def _usage_by_day(
    records: Iterable[DayRecord], year: int, status_items: list[StatusItem]
) -> Iterable[tuple[DayRecord, int, float]]:
    """Yield (record, code, amount) for every usage found in ``year``."""
    items = {i.code: i for i in status_items}
    for record in records:
        if record.date.year != year:
            continue

        leave = record.day_info.leave if record.day_info else None
        if leave is not None:
            code = status_code_for(leave.leave_type)
            item = items.get(code)
            if item is not None:
                amount = (leave.hours or 0) if item.category == "leave-hours" else 1
                yield record, item.code, amount

        for overtime in record.manual_overtime:
            item = _overtime_item_for(overtime.type, status_items)
            if item is not None:
                # mit Vorzeichen: negative Einträge buchen auf dem Konto zurück
                yield record, item.code, overtime.duration_ms / MS_PER_HOUR


def calculate_status_usage(
    records: Iterable[DayRecord], year: int, status_items: list[StatusItem]
) -> dict[int, float]:
    usage: dict[int, float] = {}
    for _, code, amount in _usage_by_day(records, year, status_items):
        usage[code] = usage.get(code, 0) + amount
    return usage


def calculate_monthly_status_usage(
    records: Iterable[DayRecord], year: int, status_code: int, status_items: list[StatusItem]
) -> list[float]:
    """Twelve monthly figures (January first) for one status code."""
    monthly = [0.0] * 12
    if not any(i.code == status_code for i in status_items):
        return monthly
    for record, code, amount in _usage_by_day(records, year, status_items):
        if code == status_code:
            monthly[record.date.month - 1] += amount
    return monthly


def calculate_balances(
    usage: dict[int, float], status_items: list[StatusItem]
) -> list[StatusBalance]:
    balances = []
    for item in status_items:
        used = usage.get(item.code, 0)
        if item.item_class == ACCRUAL_CLASS:
            remaining = item.entitlement + used
        else:
            remaining = item.entitlement - used
        balances.append(StatusBalance(
            code=item.code,
            description=item.description,
            category=item.category,
            entitlement=item.entitlement,
            used=round(used, 2),
            remaining=round(remaining, 2),
        ))
    return balances
