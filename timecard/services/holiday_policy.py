from timecard.schemas.day_info import DayInfo


def is_holiday_overtime_day(
    day_info: DayInfo | None,
    next_day_info: DayInfo | None,
    treat_holiday_as_overtime: bool,
) -> bool:
    """
    Whether overtime counts as holiday overtime.

    Only when the setting is on and the day, or the following day, is a leave
    day. The next day matters because late-night overtime of a night shift
    belongs to the following calendar day.
    """
    if not treat_holiday_as_overtime:
        return False
    return any(info is not None and info.leave is not None for info in (day_info, next_day_info))
