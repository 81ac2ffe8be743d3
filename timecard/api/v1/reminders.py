"""
Reminders API – clock-in/clock-out reminders for a day's planned shift
"""
from zoneinfo import ZoneInfo

from fastapi import APIRouter, status

from timecard.api.deps import AppSettings, DefaultWorkSettings, Scheduler
from timecard.schemas.reminder import ReminderOut, ReminderPlanRequest
from timecard.services.reminder_scheduler import reminders_for_day

router = APIRouter(prefix="/reminders", tags=["reminders"])


@router.post("/plan", response_model=list[ReminderOut])
async def plan_reminders(
    payload: ReminderPlanRequest,
    defaults: DefaultWorkSettings,
    app_settings: AppSettings,
):
    """Which reminders the day asks for, without scheduling anything."""
    reminders = reminders_for_day(
        payload.date,
        payload.day_info,
        payload.settings or defaults,
        ZoneInfo(app_settings.REMINDER_TIMEZONE),
    )
    return [ReminderOut.model_validate(r) for r in reminders]


@router.post("/schedule", response_model=list[ReminderOut])
async def schedule_reminders(
    payload: ReminderPlanRequest,
    defaults: DefaultWorkSettings,
    scheduler: Scheduler,
):
    """Replace the scheduled reminders with the ones still ahead for this day."""
    scheduled = scheduler.schedule_for_day(payload.date, payload.day_info, payload.settings or defaults)
    return [ReminderOut.model_validate(r) for r in scheduled]


@router.get("", response_model=list[ReminderOut])
async def list_pending(scheduler: Scheduler):
    return [ReminderOut.model_validate(r) for r in scheduler.pending]


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_reminders(scheduler: Scheduler):
    scheduler.cancel_all()
