"""
Clock-in / clock-out reminders for the planned shift of a day.

The scheduler owns its timer handles; callers create one per user session
and inject it where reminders are (re)planned.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable
from zoneinfo import ZoneInfo

from timecard.core.config import settings as app_settings
from timecard.schemas.day_info import DayInfo
from timecard.schemas.work_settings import WorkSettings
from timecard.services.work_summary_service import resolve_shift_window

logger = logging.getLogger(__name__)

REMINDER_CLOCK_IN  = "clock-in"
REMINDER_CLOCK_OUT = "clock-out"


@dataclass(frozen=True)
class Reminder:
    kind: str
    at: datetime
    title: str
    body: str


def reminders_for_day(
    day: date, day_info: DayInfo | None, settings: WorkSettings, tzinfo=None
) -> list[Reminder]:
    """Reminders a timed shift on ``day`` asks for; rest days and leave get none."""
    shift = settings.find_shift(day_info.shift_id) if day_info else None
    if shift is None or shift.start_hour is None or shift.end_hour is None:
        return []

    start, end = resolve_shift_window(day, shift, tzinfo)
    reminders = []
    if settings.enable_clock_in_reminder:
        reminders.append(Reminder(
            kind=REMINDER_CLOCK_IN,
            at=start,
            title="È ora di timbrare l'entrata!",
            body=f"Il tuo turno '{shift.name}' inizia alle {start:%H:%M}.",
        ))
    if settings.enable_clock_out_reminder:
        reminders.append(Reminder(
            kind=REMINDER_CLOCK_OUT,
            at=end,
            title="È ora di timbrare l'uscita!",
            body=f"Il tuo turno '{shift.name}' finisce alle {end:%H:%M}.",
        ))
    return reminders


def log_reminder(reminder: Reminder) -> None:
    """Default notify: no push transport is configured, so the reminder is logged."""
    logger.info("Reminder %s at %s: %s", reminder.kind, reminder.at, reminder.title)


class ReminderScheduler:

    def __init__(
        self,
        notify: Callable[[Reminder], Any],
        loop: asyncio.AbstractEventLoop | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._notify = notify
        self._loop = loop
        self._clock = clock or (lambda: datetime.now(ZoneInfo(app_settings.REMINDER_TIMEZONE)))
        self._handles: list[tuple[Reminder, asyncio.TimerHandle]] = []

    @property
    def pending(self) -> list[Reminder]:
        return [reminder for reminder, handle in self._handles if not handle.cancelled()]

    def schedule_for_day(
        self, day: date, day_info: DayInfo | None, settings: WorkSettings
    ) -> list[Reminder]:
        """Replace whatever is scheduled with the reminders for ``day``; past times are skipped."""
        self.cancel_all()

        now = self._clock()
        loop = self._loop or asyncio.get_running_loop()
        scheduled = []
        for reminder in reminders_for_day(day, day_info, settings, now.tzinfo):
            delay = (reminder.at - now).total_seconds()
            if delay <= 0:
                continue
            handle = loop.call_later(delay, self._fire, reminder)
            self._handles.append((reminder, handle))
            scheduled.append(reminder)

        logger.info("%d reminder(s) scheduled for %s", len(scheduled), day)
        return scheduled

    def cancel_all(self) -> None:
        for _, handle in self._handles:
            handle.cancel()
        self._handles.clear()

    def _fire(self, reminder: Reminder) -> None:
        self._handles = [(r, h) for r, h in self._handles if r is not reminder]
        try:
            result = self._notify(reminder)
            if asyncio.iscoroutine(result):
                task = (self._loop or asyncio.get_running_loop()).create_task(result)
                task.add_done_callback(_log_task_error)
        except Exception:
            logger.exception("Reminder %s failed", reminder.kind)


def _log_task_error(task: asyncio.Task) -> None:
    if not task.cancelled() and task.exception() is not None:
        logger.error("Reminder notification failed", exc_info=task.exception())
