"""
Day planning: what a calendar day was declared as.

A day is either unplanned, assigned to a shift, or a (possibly partial) leave.
The variant is tagged by ``kind`` so shift and leave can never both be set.
"""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class Unplanned(BaseModel):
    kind: Literal["unplanned"] = "unplanned"


class ShiftAssignment(BaseModel):
    kind: Literal["shift"] = "shift"
    shift_id: str


class LeaveAssignment(BaseModel):
    kind: Literal["leave"] = "leave"
    leave_type: str                  # e.g. "code-15", legacy "vacation"
    hours: Optional[float] = None    # partial-day leave


DayPlan = Annotated[
    Union[Unplanned, ShiftAssignment, LeaveAssignment],
    Field(discriminator="kind"),
]


class DayInfo(BaseModel):
    plan: DayPlan = Field(default_factory=Unplanned)
    on_call: bool = False

    @classmethod
    def for_shift(cls, shift_id: str, on_call: bool = False) -> "DayInfo":
        return cls(plan=ShiftAssignment(shift_id=shift_id), on_call=on_call)

    @classmethod
    def for_leave(cls, leave_type: str, hours: float | None = None) -> "DayInfo":
        return cls(plan=LeaveAssignment(leave_type=leave_type, hours=hours))

    @property
    def shift_id(self) -> str | None:
        return self.plan.shift_id if isinstance(self.plan, ShiftAssignment) else None

    @property
    def leave(self) -> LeaveAssignment | None:
        return self.plan if isinstance(self.plan, LeaveAssignment) else None
