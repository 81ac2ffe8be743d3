from fastapi import APIRouter

from timecard.api.deps import AppSettings
from timecard.schemas.meal_voucher import MealVoucherEvaluation, MealVoucherRequest
from timecard.services.meal_voucher_service import evaluate_meal_voucher

router = APIRouter(prefix="/meal-vouchers", tags=["meal-vouchers"])


@router.post("/evaluate", response_model=MealVoucherEvaluation)
async def evaluate(payload: MealVoucherRequest, app_settings: AppSettings):
    return evaluate_meal_voucher(
        payload.entries,
        min_hours=payload.min_hours if payload.min_hours is not None else app_settings.MEAL_VOUCHER_MIN_HOURS,
        max_break_hours=(
            payload.max_break_hours
            if payload.max_break_hours is not None
            else app_settings.MEAL_VOUCHER_MAX_BREAK_HOURS
        ),
    )
