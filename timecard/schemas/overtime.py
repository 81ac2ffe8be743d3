from pydantic import BaseModel

OVERTIME_DIURNAL           = "diurnal"
OVERTIME_NOCTURNAL         = "nocturnal"
OVERTIME_HOLIDAY           = "holiday"
OVERTIME_NOCTURNAL_HOLIDAY = "nocturnal-holiday"

# Status-code types ("code-2041" = course, permit, ...) are counted as excess.
STATUS_CODE_PREFIX = "code-"


class ManualOvertimeEntry(BaseModel):
    id: str
    duration_ms: int
    type: str
    note: str = ""
    used_entry_ids: list[str] = []   # punches this entry justifies
