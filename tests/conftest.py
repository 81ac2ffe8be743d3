"""
Shared pytest fixtures for timecard tests.

The engine is pure, so most tests build their inputs with the helpers below
and call the services directly; HTTP tests use the ``client`` fixture.
"""
from datetime import date, datetime, timedelta

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from timecard.main import app
from timecard.schemas.time_entry import TimeEntry
from timecard.utils.durations import MS_PER_HOUR, MS_PER_MINUTE


# ── HTTP client fixture ───────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def client() -> AsyncClient:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c


# ── Helper ────────────────────────────────────────────────────────────────────

def at(day: date, hhmm: str, days_later: int = 0) -> datetime:
    h, m = map(int, hhmm.split(":"))
    return datetime(day.year, day.month, day.day, h, m) + timedelta(days=days_later)


def make_entry(day: date, hhmm: str, kind: str, entry_id: str | None = None, days_later: int = 0) -> TimeEntry:
    return TimeEntry(
        id=entry_id or f"{kind}-{hhmm}",
        timestamp=at(day, hhmm, days_later),
        kind=kind,
    )


def punches(day: date, *spans: tuple[str, str]) -> list[TimeEntry]:
    """punches(d, ("08:00", "12:00"), ("13:00", "17:00")) → in/out pairs.
    An end earlier than its start is dated on the next day."""
    entries = []
    for n, (start, end) in enumerate(spans, start=1):
        overnight = 1 if end <= start else 0
        entries.append(make_entry(day, start, "in", f"in-{n}"))
        entries.append(make_entry(day, end, "out", f"out-{n}", days_later=overnight))
    return entries


def hours(h: float) -> int:
    return round(h * MS_PER_HOUR)


def minutes(m: float) -> int:
    return round(m * MS_PER_MINUTE)
