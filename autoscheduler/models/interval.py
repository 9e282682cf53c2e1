"""ExistingInterval data model for AutoScheduler."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator


def _real(dt: datetime) -> datetime:
    # Same-zone aware datetimes compare on the wall clock, which misorders
    # times around a DST change.
    return dt.astimezone(timezone.utc) if dt.tzinfo is not None else dt


class IntervalKind(str, Enum):
    """What occupies an interval."""
    TASK = "task"
    MEETING = "meeting"
    BLOCK = "block"
    BREAK = "break"


class ExistingInterval(BaseModel):
    """An occupied stretch of calendar time the scheduler must avoid."""
    
    id: str = Field(..., description="Unique interval identifier")
    title: str = Field("", description="Display title")
    start: datetime = Field(..., description="Interval start (inclusive)")
    end: datetime = Field(..., description="Interval end (exclusive)")
    kind: IntervalKind = Field(IntervalKind.MEETING, description="What occupies the interval")
    item_id: Optional[str] = Field(None, description="ID of the item this interval satisfies, if any")
    
    class Config:
        """Pydantic configuration."""
        frozen = True
    
    @model_validator(mode="after")
    def _check_range(self):
        if _real(self.end) <= _real(self.start):
            raise ValueError(f"interval end ({self.end}) must be after start ({self.start})")
        return self
    
    def overlaps(self, start: datetime, end: datetime) -> bool:
        """Half-open overlap test against [start, end)."""
        return _real(self.start) < _real(end) and _real(start) < _real(self.end)
