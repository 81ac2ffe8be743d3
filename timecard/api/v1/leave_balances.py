from fastapi import APIRouter

from timecard.schemas.leave_balance import LeaveUsageOut, LeaveUsageRequest
from timecard.services.leave_balance_service import calculate_balances, calculate_status_usage

router = APIRouter(prefix="/leave-balances", tags=["leave-balances"])


@router.post("/usage", response_model=LeaveUsageOut)
async def leave_usage(payload: LeaveUsageRequest):
    """Usage per status code for the year, and what is left of each entitlement."""
    usage = calculate_status_usage(payload.days, payload.year, payload.status_items)
    return LeaveUsageOut(
        year=payload.year,
        usage={code: round(amount, 2) for code, amount in usage.items()},
        balances=calculate_balances(usage, payload.status_items),
    )
