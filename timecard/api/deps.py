from typing import Annotated

from fastapi import Depends, Request

from timecard.core.config import Settings, settings
from timecard.schemas.work_settings import WorkSettings
from timecard.services.reminder_scheduler import ReminderScheduler, log_reminder


def get_settings() -> Settings:
    return settings


def get_default_work_settings(
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> WorkSettings:
    """Rules applied when a request does not carry its own WorkSettings."""
    return WorkSettings(
        standard_day_hours=app_settings.DEFAULT_STANDARD_DAY_HOURS,
        night_time_start_hour=app_settings.DEFAULT_NIGHT_START_HOUR,
        night_time_end_hour=app_settings.DEFAULT_NIGHT_END_HOUR,
        treat_holiday_as_overtime=app_settings.DEFAULT_TREAT_HOLIDAY_AS_OVERTIME,
        deduct_auto_break=app_settings.DEFAULT_DEDUCT_AUTO_BREAK,
        auto_break_threshold_hours=app_settings.DEFAULT_AUTO_BREAK_THRESHOLD_HOURS,
        auto_break_minutes=app_settings.DEFAULT_AUTO_BREAK_MINUTES,
    )


def get_reminder_scheduler(request: Request) -> ReminderScheduler:
    """The app-wide scheduler; created here if the lifespan has not set one up."""
    state = request.app.state
    if getattr(state, "reminder_scheduler", None) is None:
        state.reminder_scheduler = ReminderScheduler(notify=log_reminder)
    return state.reminder_scheduler


AppSettings = Annotated[Settings, Depends(get_settings)]
DefaultWorkSettings = Annotated[WorkSettings, Depends(get_default_work_settings)]
Scheduler = Annotated[ReminderScheduler, Depends(get_reminder_scheduler)]
