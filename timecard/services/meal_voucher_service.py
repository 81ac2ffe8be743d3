"""
Meal voucher eligibility for one day.

A day earns (at most) one voucher when the employee works MIN_HOURS in one
session, or across consecutive sessions whose breaks do not exceed
MAX_BREAK_HOURS. A longer break starts the count again.
"""
from datetime import timedelta
from typing import Iterable

from timecard.schemas.meal_voucher import MealVoucherEvaluation, WorkSessionInfo
from timecard.schemas.time_entry import TimeEntry
from timecard.services.work_summary_service import WorkInterval, build_work_intervals
from timecard.utils.durations import format_duration, hours_to_ms, ms_to_hours

MIN_HOURS = 7
MAX_BREAK_HOURS = 2


def _reaches_threshold(sessions: list[WorkInterval], min_ms: int, max_break_ms: int) -> bool:
    cumulative_ms = 0
    last_end = None
    for session in sessions:
        if last_end is not None and session.start - last_end > timedelta(milliseconds=max_break_ms):
            cumulative_ms = 0
        cumulative_ms += session.duration_ms
        last_end = session.end
        if cumulative_ms >= min_ms:
            return True
    return False


def is_meal_voucher_eligible(
    entries: Iterable[TimeEntry],
    min_hours: float = MIN_HOURS,
    max_break_hours: float = MAX_BREAK_HOURS,
) -> bool:
    entries = list(entries)
    if len(entries) < 2:
        return False
    sessions = build_work_intervals(entries)
    return _reaches_threshold(sessions, hours_to_ms(min_hours), hours_to_ms(max_break_hours))


def evaluate_meal_voucher(
    entries: Iterable[TimeEntry],
    min_hours: float = MIN_HOURS,
    max_break_hours: float = MAX_BREAK_HOURS,
) -> MealVoucherEvaluation:
    """Eligibility plus the session breakdown shown next to it."""
    entries = list(entries)
    sessions = build_work_intervals(entries) if len(entries) >= 2 else []

    infos: list[WorkSessionInfo] = []
    for i, session in enumerate(sessions):
        info = WorkSessionInfo(
            start=session.start,
            end=session.end,
            hours=ms_to_hours(session.duration_ms),
            duration=format_duration(session.duration_ms),
        )
        if i < len(sessions) - 1:
            gap = WorkInterval(session.end, sessions[i + 1].start)
            info.break_after_hours = ms_to_hours(gap.duration_ms)
        infos.append(info)

    total_ms = sum(s.duration_ms for s in sessions)
    eligible = bool(sessions) and _reaches_threshold(
        sessions, hours_to_ms(min_hours), hours_to_ms(max_break_hours)
    )
    return MealVoucherEvaluation(eligible=eligible, total_hours=ms_to_hours(total_ms), sessions=infos)
