"""
Work summary: splits a day's punches into standard, excess, null and the four
overtime buckets (diurnal, nocturnal, holiday, nocturnal-holiday).

Excess vs. overtime
-------------------
Time beyond the standard day is classified as follows:

* With a shift planned, work beyond the standard day is excess. This holds
  for rest-day shifts too, which have no bounds.
* Work after the shift end is overtime only if the day's post-shift time
  exceeds POST_SHIFT_GRACE_MS (configurable as ``post_shift_grace_minutes``);
  otherwise it is excess as well.
* Without a shift, everything beyond the standard day is overtime.

Overtime is then bucketed by night window and holiday status of the chunk.
Time before the planned shift start is null time (worked, not payable).

Callers must pass ``out`` timestamps already rolled over to the next calendar
day for overnight work; intervals are never re-dated here. When naive and
offset-aware timestamps are mixed, naive ones are read in the zone of the
first aware one and every aware one is converted to that zone.
"""
import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

from timecard.schemas.day_info import DayInfo
from timecard.schemas.overtime import (
    ManualOvertimeEntry,
    OVERTIME_DIURNAL,
    OVERTIME_HOLIDAY,
    OVERTIME_NOCTURNAL,
    OVERTIME_NOCTURNAL_HOLIDAY,
)
from timecard.schemas.time_entry import TimeEntry
from timecard.schemas.work_settings import Shift, WorkSettings
from timecard.schemas.work_summary import WorkDaySummary, WorkIntervalSummary, WorkSummaryResult
from timecard.services.holiday_policy import is_holiday_overtime_day
from timecard.utils.durations import MS_PER_MINUTE, hours_to_ms, minutes_to_ms
from timecard.utils.night_window import at_hour, is_night, night_boundaries

logger = logging.getLogger(__name__)

POST_SHIFT_GRACE_MS = 15 * MS_PER_MINUTE

MANUAL_OVERTIME_BUCKETS = {
    OVERTIME_DIURNAL:           "overtime_diurnal_ms",
    OVERTIME_NOCTURNAL:         "overtime_nocturnal_ms",
    OVERTIME_HOLIDAY:           "overtime_holiday_ms",
    OVERTIME_NOCTURNAL_HOLIDAY: "overtime_nocturnal_holiday_ms",
}

_ONE_MS = timedelta(milliseconds=1)


def _ms_between(start: datetime, end: datetime) -> int:
    return (end - start) // _ONE_MS


def _common_tzinfo(values: Iterable[datetime]):
    return next((v.tzinfo for v in values if v.tzinfo is not None), None)


def _in_zone(value: datetime, tzinfo) -> datetime:
    if tzinfo is None:
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=tzinfo)
    return value.astimezone(tzinfo)


@dataclass(frozen=True)
class WorkInterval:
    start: datetime
    end: datetime
    opening_entry_id: str | None = None
    closing_entry_id: str | None = None

    @property
    def duration_ms(self) -> int:
        return max(0, _ms_between(self.start, self.end))


def build_work_intervals(entries: Iterable[TimeEntry]) -> list[WorkInterval]:
    """
    Pair punches into in→out intervals.

    Entries are sorted by timestamp first. A second ``in`` while a session is
    open and an ``out`` without an open session are ignored; a trailing open
    session is the live one and is not counted.
    """
    entries = list(entries)
    tzinfo = _common_tzinfo(e.timestamp for e in entries)
    stamped = sorted(
        ((_in_zone(e.timestamp, tzinfo), e) for e in entries),
        key=lambda pair: pair[0],
    )

    intervals: list[WorkInterval] = []
    open_entry: TimeEntry | None = None
    open_at: datetime | None = None

    for timestamp, entry in stamped:
        if entry.kind == "in":
            if open_entry is None:
                open_entry, open_at = entry, timestamp
            else:
                logger.debug("Duplicate clock-in %s ignored", entry.id)
        elif open_entry is None:
            logger.debug("Clock-out %s without clock-in ignored", entry.id)
        else:
            intervals.append(WorkInterval(
                start=open_at,
                end=timestamp,
                opening_entry_id=open_entry.id,
                closing_entry_id=entry.id,
            ))
            open_entry = None

    if open_entry is not None:
        logger.debug("Open session since %s not counted", open_at)
    return intervals


def resolve_shift_window(
    day: date, shift: Shift | None, tzinfo=None
) -> tuple[datetime | None, datetime | None]:
    """Planned shift start/end on ``day``; an end before the start is on the next day."""
    if shift is None:
        return None, None

    start = None
    if shift.start_hour is not None:
        start = at_hour(day, shift.start_hour, shift.start_minute, tzinfo)

    end = None
    if shift.end_hour is not None:
        end = at_hour(day, shift.end_hour, shift.end_minute, tzinfo)
        if start is not None and end < start:
            end += timedelta(days=1)
    return start, end


def _standard_day_ms(settings: WorkSettings, day_info: DayInfo | None) -> int:
    standard_ms = hours_to_ms(settings.standard_day_hours)
    leave = day_info.leave if day_info else None
    # Stundenweiser Urlaub verkürzt den Normalarbeitstag
    if leave is not None and leave.hours and leave.hours > 0:
        standard_ms -= hours_to_ms(leave.hours)
    return max(0, standard_ms)


def _add_overtime(summary: WorkDaySummary, ms: int, night: bool, holiday: bool) -> None:
    if holiday:
        if night:
            summary.overtime_nocturnal_holiday_ms += ms
        else:
            summary.overtime_holiday_ms += ms
    elif night:
        summary.overtime_nocturnal_ms += ms
    else:
        summary.overtime_diurnal_ms += ms


def _deduct_auto_break(
    summaries: list[WorkIntervalSummary], settings: WorkSettings
) -> int:
    """Take the automatic break once per day from standard time, last interval first."""
    if not settings.deduct_auto_break or not summaries:
        return 0

    worked_ms = sum(_ms_between(s.start, s.end) for s in summaries)
    if worked_ms <= hours_to_ms(settings.auto_break_threshold_hours):
        return 0

    remaining = max(0, minutes_to_ms(settings.auto_break_minutes))
    deducted = 0
    for summary in reversed(summaries):
        if remaining <= 0:
            break
        take = min(summary.standard_work_ms, remaining)
        summary.standard_work_ms -= take
        summary.total_work_ms -= take
        remaining -= take
        deducted += take
    return deducted


def summarize_intervals(
    day: date,
    intervals: Sequence[WorkInterval],
    settings: WorkSettings,
    day_info: DayInfo | None = None,
    next_day_info: DayInfo | None = None,
) -> list[WorkIntervalSummary]:
    """Classify already-paired intervals of ``day``, in chronological order."""
    tzinfo = _common_tzinfo(v for i in intervals for v in (i.start, i.end))
    aligned = [
        replace(i, start=_in_zone(i.start, tzinfo), end=_in_zone(i.end, tzinfo)) for i in intervals
    ]

    counted = []
    for interval in sorted(aligned, key=lambda i: i.start):
        if interval.end <= interval.start:
            logger.debug("Empty interval closed by %s skipped", interval.closing_entry_id)
            continue
        counted.append(interval)
    if not counted:
        return []

    shift = settings.find_shift(day_info.shift_id) if day_info else None
    shift_start, shift_end = resolve_shift_window(day, shift, tzinfo)
    # auch ein Ruhetag-Turnus ohne Zeiten macht Mehrzeit zu excess
    has_shift = shift is not None

    night_start = settings.night_time_start_hour
    night_end = settings.night_time_end_hour
    next_midnight = at_hour(day, 24, tzinfo=tzinfo)
    holiday_today = is_holiday_overtime_day(day_info, None, settings.treat_holiday_as_overtime)
    holiday_next_day = is_holiday_overtime_day(None, next_day_info, settings.treat_holiday_as_overtime)

    post_shift_overtime = False
    if shift_end is not None:
        post_shift_ms = sum(
            _ms_between(max(i.start, shift_end), i.end) for i in counted if i.end > shift_end
        )
        grace_ms = max(0, minutes_to_ms(settings.post_shift_grace_minutes))
        post_shift_overtime = post_shift_ms > grace_ms

    standard_left = _standard_day_ms(settings, day_info)
    summaries: list[WorkIntervalSummary] = []

    for interval in counted:
        summary = WorkIntervalSummary(
            start=interval.start,
            end=interval.end,
            closing_entry_id=interval.closing_entry_id,
        )

        payable_start = interval.start
        if shift_start is not None and shift_start > interval.start:
            payable_start = min(shift_start, interval.end)
            summary.null_hours_ms = _ms_between(interval.start, payable_start)

        cuts = {payable_start, interval.end}
        cuts.update(night_boundaries(payable_start, interval.end, night_start, night_end))
        for point in (shift_end, next_midnight):
            if point is not None and payable_start < point < interval.end:
                cuts.add(point)
        points = sorted(cuts)

        for chunk_start, chunk_end in zip(points, points[1:]):
            chunk_ms = _ms_between(chunk_start, chunk_end)
            if chunk_ms <= 0:
                continue
            night = is_night(chunk_start, night_start, night_end)
            holiday = holiday_next_day if chunk_start >= next_midnight else holiday_today

            if shift_end is not None and chunk_start >= shift_end:
                if post_shift_overtime:
                    _add_overtime(summary, chunk_ms, night, holiday)
                else:
                    summary.excess_hours_ms += chunk_ms
                continue

            standard_ms = min(chunk_ms, standard_left)
            standard_left -= standard_ms
            summary.standard_work_ms += standard_ms

            extra_ms = chunk_ms - standard_ms
            if extra_ms <= 0:
                continue
            if has_shift:
                summary.excess_hours_ms += extra_ms
            else:
                _add_overtime(summary, extra_ms, night, holiday)

        summary.total_work_ms = summary.payable_ms
        summaries.append(summary)

    deducted = _deduct_auto_break(summaries, settings)
    if deducted:
        logger.debug("Auto break of %d ms deducted on %s", deducted, day)
    return summaries


def manual_overtime_bucket(overtime_type: str) -> str:
    """Summary field for a manual entry; status codes and unknown types are excess."""
    return MANUAL_OVERTIME_BUCKETS.get(overtime_type.strip(), "excess_hours_ms")


def calculate_work_summary(
    day: date,
    entries: Iterable[TimeEntry],
    settings: WorkSettings,
    day_info: DayInfo | None = None,
    next_day_info: DayInfo | None = None,
    manual_overtime_entries: Iterable[ManualOvertimeEntry] = (),
) -> WorkSummaryResult:
    """
    Day summary plus one breakdown per completed interval.

    Manual overtime is added on top of the punch-derived buckets as declared,
    without night/holiday reclassification. Punches a manual entry refers to
    in ``used_entry_ids`` are not counted again.
    """
    manual = list(manual_overtime_entries or ())
    used_ids = {entry_id for m in manual for entry_id in m.used_entry_ids}

    intervals = []
    for interval in build_work_intervals(entries or ()):
        if interval.opening_entry_id in used_ids or interval.closing_entry_id in used_ids:
            logger.debug("Interval closed by %s covered by manual overtime", interval.closing_entry_id)
            continue
        intervals.append(interval)

    interval_summaries = summarize_intervals(day, intervals, settings, day_info, next_day_info)

    summary = WorkDaySummary()
    for interval_summary in interval_summaries:
        summary.add(interval_summary)

    for entry in manual:
        if entry.duration_ms <= 0:
            logger.debug("Manual overtime %s without duration ignored", entry.id)
            continue
        bucket = manual_overtime_bucket(entry.type)
        setattr(summary, bucket, getattr(summary, bucket) + entry.duration_ms)
        summary.total_work_ms += entry.duration_ms

    return WorkSummaryResult(summary=summary, intervals=interval_summaries)


class WorkSummaryCalculator:
    """Binds one WorkSettings to the day calculation, for month/range reports."""

    def __init__(self, settings: WorkSettings):
        self.settings = settings

    def calculate(
        self,
        day: date,
        entries: Iterable[TimeEntry],
        day_info: DayInfo | None = None,
        next_day_info: DayInfo | None = None,
        manual_overtime_entries: Iterable[ManualOvertimeEntry] = (),
    ) -> WorkSummaryResult:
        return calculate_work_summary(
            day, entries, self.settings, day_info, next_day_info, manual_overtime_entries
        )
