from typing import Optional

from pydantic import BaseModel, Field


class Shift(BaseModel):
    """A planned shift; no start and no end means a rest day."""
    id: str
    name: str
    start_hour: Optional[int] = Field(default=None, ge=0, le=24)
    start_minute: int = Field(default=0, ge=0, le=59)
    end_hour: Optional[int] = Field(default=None, ge=0, le=24)
    end_minute: int = Field(default=0, ge=0, le=59)


DEFAULT_SHIFTS: list[Shift] = [
    Shift(id="morning",   name="Mattina",    start_hour=8,  end_hour=14),
    Shift(id="afternoon", name="Pomeriggio", start_hour=14, end_hour=20),
    Shift(id="evening",   name="Serale",     start_hour=16, end_hour=22),
    Shift(id="night",     name="Notturno",   start_hour=21, end_hour=3),
    Shift(id="rest",      name="Riposo"),
]


class WorkSettings(BaseModel):
    # negative hours are not rejected here, the calculator counts them as zero
    standard_day_hours: float = 6
    night_time_start_hour: int = Field(default=22, ge=0, le=24)
    night_time_end_hour: int = Field(default=6, ge=0, le=24)
    treat_holiday_as_overtime: bool = True
    deduct_auto_break: bool = False
    auto_break_threshold_hours: float = 6
    auto_break_minutes: int = 30
    post_shift_grace_minutes: int = 15
    enable_clock_in_reminder: bool = False
    enable_clock_out_reminder: bool = True
    shifts: list[Shift] = Field(default_factory=lambda: [s.model_copy() for s in DEFAULT_SHIFTS])

    def find_shift(self, shift_id: str | None) -> Shift | None:
        if shift_id is None:
            return None
        return next((s for s in self.shifts if s.id == shift_id), None)
