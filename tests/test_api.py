"""
HTTP-Tests für die v1-Router (calculate, monthly, compare, meal vouchers, leave usage).
"""
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from httpx import AsyncClient

from timecard.api.deps import get_reminder_scheduler
from timecard.main import app
from timecard.services.reminder_scheduler import ReminderScheduler, log_reminder
from tests.conftest import hours

DAY_PAYLOAD = {
    "date": "2024-06-10",
    "entries": [
        {"id": "e1", "timestamp": "2024-06-10T08:00:00", "kind": "in"},
        {"id": "e2", "timestamp": "2024-06-10T16:00:00", "kind": "out"},
    ],
}


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_default_settings(client: AsyncClient):
    resp = await client.get("/api/v1/work-summary/default-settings")
    assert resp.status_code == 200
    data = resp.json()
    assert data["standard_day_hours"] == 6
    assert data["night_time_start_hour"] == 22
    assert data["night_time_end_hour"] == 6
    assert {s["id"] for s in data["shifts"]} >= {"morning", "night", "rest"}


@pytest.mark.asyncio
async def test_calculate_day(client: AsyncClient):
    resp = await client.post("/api/v1/work-summary/calculate", json=DAY_PAYLOAD)
    assert resp.status_code == 200
    data = resp.json()
    assert data["summary"]["total_work_ms"] == hours(8)
    assert data["summary"]["standard_work_ms"] == hours(6)
    assert data["summary"]["overtime_diurnal_ms"] == hours(2)
    assert len(data["intervals"]) == 1
    assert data["intervals"][0]["closing_entry_id"] == "e2"


@pytest.mark.asyncio
async def test_calculate_with_shift_and_manual_overtime(client: AsyncClient):
    payload = {
        **DAY_PAYLOAD,
        "settings": {"standard_day_hours": 6},
        "day_info": {"plan": {"kind": "shift", "shift_id": "morning"}},
        "manual_overtime": [{"id": "m1", "duration_ms": hours(1), "type": "nocturnal"}],
    }
    resp = await client.post("/api/v1/work-summary/calculate", json=payload)
    assert resp.status_code == 200
    summary = resp.json()["summary"]
    assert summary["standard_work_ms"] == hours(6)
    assert summary["overtime_diurnal_ms"] == hours(2)
    assert summary["overtime_nocturnal_ms"] == hours(1)
    assert summary["total_work_ms"] == hours(9)


@pytest.mark.asyncio
async def test_calculate_mixed_timestamp_forms(client: AsyncClient):
    payload = {
        "date": "2024-06-10",
        "entries": [
            {"id": "e1", "timestamp": "2024-06-10T08:00:00", "kind": "in"},
            {"id": "e2", "timestamp": "2024-06-10T12:00:00Z", "kind": "out"},
        ],
    }
    resp = await client.post("/api/v1/work-summary/calculate", json=payload)
    assert resp.status_code == 200
    summary = resp.json()["summary"]
    assert summary["total_work_ms"] == hours(4)
    assert summary["standard_work_ms"] == hours(4)


@pytest.mark.asyncio
async def test_calculate_rejects_unknown_punch_kind(client: AsyncClient):
    payload = {
        "date": "2024-06-10",
        "entries": [{"id": "e1", "timestamp": "2024-06-10T08:00:00", "kind": "pause"}],
    }
    resp = await client.post("/api/v1/work-summary/calculate", json=payload)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_calculate_rejects_unknown_day_plan(client: AsyncClient):
    payload = {**DAY_PAYLOAD, "day_info": {"plan": {"kind": "holiday"}}}
    resp = await client.post("/api/v1/work-summary/calculate", json=payload)
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_monthly_stats(client: AsyncClient):
    payload = {
        "year": 2024,
        "month": 6,
        "days": [{"date": "2024-06-10", "entries": DAY_PAYLOAD["entries"]}],
    }
    resp = await client.post("/api/v1/work-summary/monthly", json=payload)
    assert resp.status_code == 200
    data = resp.json()
    assert data["month"] == "2024-06"
    assert data["total_hours"] == 8.0
    assert data["work_days"] == 1


@pytest.mark.asyncio
async def test_monthly_invalid_month(client: AsyncClient):
    resp = await client.post("/api/v1/work-summary/monthly", json={"year": 2024, "month": 13})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_compare_months(client: AsyncClient):
    payload = {
        "year": 2024,
        "month": 6,
        "previous_year": 2024,
        "previous_month": 5,
        "days": [{"date": "2024-06-10", "entries": DAY_PAYLOAD["entries"]}],
    }
    resp = await client.post("/api/v1/work-summary/compare", json=payload)
    assert resp.status_code == 200
    assert resp.json()["delta"]["total_hours"] == 8.0


@pytest.mark.asyncio
async def test_compare_invalid_previous_month(client: AsyncClient):
    payload = {"year": 2024, "month": 1, "previous_year": 2023, "previous_month": 0}
    resp = await client.post("/api/v1/work-summary/compare", json=payload)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_yearly_trend(client: AsyncClient):
    payload = {"year": 2024, "days": [{"date": "2024-06-10", "entries": DAY_PAYLOAD["entries"]}]}
    resp = await client.post("/api/v1/work-summary/yearly", json=payload)
    assert resp.status_code == 200
    months = resp.json()
    assert len(months) == 12
    assert months[5]["month"] == "2024-06"
    assert months[5]["total_hours"] == 8.0
    assert months[5]["total_hours_display"] == "08:00"


@pytest.mark.asyncio
async def test_compare_years(client: AsyncClient):
    payload = {
        "year": 2024,
        "previous_year": 2023,
        "days": [{"date": "2024-06-10", "entries": DAY_PAYLOAD["entries"]}],
    }
    resp = await client.post("/api/v1/work-summary/compare-years", json=payload)
    assert resp.status_code == 200
    delta = resp.json()["delta"]
    assert delta["total_hours"] == 8.0
    assert delta["total_work_days"] == 1
    assert delta["total_overtime"] == 2.0


@pytest.mark.asyncio
async def test_meal_voucher(client: AsyncClient):
    resp = await client.post("/api/v1/meal-vouchers/evaluate", json={"entries": DAY_PAYLOAD["entries"]})
    assert resp.status_code == 200
    data = resp.json()
    assert data["eligible"] is True
    assert data["total_hours"] == 8.0


@pytest.mark.asyncio
async def test_meal_voucher_custom_threshold(client: AsyncClient):
    resp = await client.post(
        "/api/v1/meal-vouchers/evaluate",
        json={"entries": DAY_PAYLOAD["entries"], "min_hours": 9},
    )
    assert resp.json()["eligible"] is False


@pytest.mark.asyncio
async def test_leave_usage(client: AsyncClient):
    payload = {
        "year": 2024,
        "status_items": [
            {"code": 15, "description": "Ferie", "year": 2024, "category": "leave-day", "entitlement": 26},
        ],
        "days": [
            {"date": "2024-03-04", "day_info": {"plan": {"kind": "leave", "leave_type": "code-15"}}},
            {"date": "2024-03-05", "day_info": {"plan": {"kind": "leave", "leave_type": "vacation"}}},
        ],
    }
    resp = await client.post("/api/v1/leave-balances/usage", json=payload)
    assert resp.status_code == 200
    data = resp.json()
    assert data["usage"] == {"15": 2}
    assert data["balances"][0]["remaining"] == 24


# ── Reminders ─────────────────────────────────────────────────────────────────

ROME = ZoneInfo("Europe/Rome")
MORNING_DAY = {"date": "2024-06-10", "day_info": {"plan": {"kind": "shift", "shift_id": "morning"}}}


@pytest.fixture
def reminder_scheduler():
    scheduler = ReminderScheduler(notify=log_reminder, clock=lambda: datetime(2024, 6, 10, 7, 0, tzinfo=ROME))
    app.dependency_overrides[get_reminder_scheduler] = lambda: scheduler
    yield scheduler
    scheduler.cancel_all()
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_plan_reminders_night_shift(client: AsyncClient):
    payload = {
        "date": "2024-06-10",
        "day_info": {"plan": {"kind": "shift", "shift_id": "night"}},
        "settings": {"enable_clock_in_reminder": True},
    }
    resp = await client.post("/api/v1/reminders/plan", json=payload)
    assert resp.status_code == 200
    by_kind = {r["kind"]: r["at"] for r in resp.json()}
    assert by_kind["clock-in"].startswith("2024-06-10T21:00:00")
    assert by_kind["clock-out"].startswith("2024-06-11T03:00:00")


@pytest.mark.asyncio
async def test_plan_reminders_leave_day(client: AsyncClient):
    payload = {"date": "2024-06-10", "day_info": {"plan": {"kind": "leave", "leave_type": "code-15"}}}
    resp = await client.post("/api/v1/reminders/plan", json=payload)
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_schedule_list_and_cancel_reminders(client: AsyncClient, reminder_scheduler):
    resp = await client.post("/api/v1/reminders/schedule", json=MORNING_DAY)
    assert resp.status_code == 200
    assert [r["kind"] for r in resp.json()] == ["clock-out"]

    resp = await client.get("/api/v1/reminders")
    assert len(resp.json()) == 1
    assert len(reminder_scheduler.pending) == 1

    resp = await client.delete("/api/v1/reminders")
    assert resp.status_code == 204
    resp = await client.get("/api/v1/reminders")
    assert resp.json() == []
