"""
Night window: a daily [start_hour, end_hour) range that may wrap past
midnight (22–06). start_hour == end_hour is an empty window.
"""
from datetime import date, datetime, time, timedelta


def is_night(instant: datetime, night_start_hour: int, night_end_hour: int) -> bool:
    """True if the local hour of ``instant`` falls inside the night window."""
    hour = instant.hour
    if night_start_hour <= night_end_hour:
        return night_start_hour <= hour < night_end_hour
    # wrap-around (z.B. 22:00–06:00 geht über Mitternacht)
    return hour >= night_start_hour or hour < night_end_hour


def at_hour(day: date, hour: int, minute: int = 0, tzinfo=None) -> datetime:
    """``day`` + hour:minute; hour 24 is the next midnight."""
    return datetime.combine(day, time(0, tzinfo=tzinfo)) + timedelta(hours=hour, minutes=minute)


def night_boundaries(
    start: datetime,
    end: datetime,
    night_start_hour: int,
    night_end_hour: int,
) -> list[datetime]:
    """
    Every window edge strictly inside (start, end), sorted.

    Edges are generated for each calendar day the range touches (plus the day
    before, for a wrapped window that began yesterday), so splitting a range
    at these points yields chunks that are entirely night or entirely day.
    """
    if night_start_hour == night_end_hour or end <= start:
        return []

    edges: set[datetime] = set()
    day = start.date() - timedelta(days=1)
    while day <= end.date():
        for hour in (night_start_hour, night_end_hour):
            edge = at_hour(day, hour, tzinfo=start.tzinfo)
            if start < edge < end:
                edges.add(edge)
        day += timedelta(days=1)
    return sorted(edges)
