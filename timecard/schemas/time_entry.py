from datetime import datetime as DateTime
from typing import Literal

from pydantic import BaseModel


class TimeEntry(BaseModel):
    """A single punch. Lists of entries are unordered; sort before pairing."""
    id: str
    timestamp: DateTime
    kind: Literal["in", "out"]
