"""
Millisecond helpers. All accounting is done in integer milliseconds;
conversion to hours happens only for display and reporting.
"""

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def hours_to_ms(hours: float) -> int:
    return round(hours * MS_PER_HOUR)


def minutes_to_ms(minutes: float) -> int:
    return round(minutes * MS_PER_MINUTE)


def ms_to_hours(ms: int, ndigits: int = 2) -> float:
    return round(ms / MS_PER_HOUR, ndigits)


def format_duration(ms: int) -> str:
    """12_600_000 → '03:30:00'. Negative durations show as zero."""
    total_seconds = max(0, ms) // MS_PER_SECOND
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_hours_decimal(hours: float) -> str:
    """18.5 → '18:30', -2.25 → '-02:15'."""
    sign = "-" if hours < 0 else ""
    whole, fraction = divmod(abs(hours), 1)
    whole = int(whole)
    minutes = round(fraction * 60)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    return f"{sign}{whole:02d}:{minutes:02d}"
