"""Scheduling outcome models for AutoScheduler."""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from autoscheduler.models.interval import ExistingInterval, IntervalKind


class TimeSlot(BaseModel):
    """Candidate placement found during slot search."""
    
    start: datetime = Field(..., description="Slot start")
    end: datetime = Field(..., description="Slot end (start + item duration)")
    
    class Config:
        """Pydantic configuration."""
        frozen = True
    
    @property
    def duration_min(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)


class Placement(BaseModel):
    """An item committed to a time slot."""
    
    item_id: str = Field(..., description="ID of the placed item")
    title: str = Field("", description="Title of the placed item")
    start: datetime = Field(..., description="Placement start")
    end: datetime = Field(..., description="Placement end")
    confidence: float = Field(..., ge=0.0, le=1.0, description="How favorable the placement is")
    
    def to_interval(self) -> ExistingInterval:
        """Convert to the occupied interval other items must avoid."""
        return ExistingInterval(
            id=f"task-{self.item_id}",
            title=self.title,
            start=self.start,
            end=self.end,
            kind=IntervalKind.TASK,
            item_id=self.item_id,
        )


class FailureReason(str, Enum):
    """Why an item could not be placed."""
    DEPENDENCIES_NOT_SATISFIED = "dependencies_not_satisfied"
    NO_AVAILABLE_SLOTS = "no_available_slots"


class PlacementFailure(BaseModel):
    """An item the scheduler could not place, with the reason."""
    
    item_id: str = Field(..., description="ID of the unplaced item")
    code: FailureReason = Field(..., description="Machine-readable failure reason")
    reason: str = Field(..., description="Human-readable failure reason")
    missing_dependencies: List[str] = Field(default_factory=list, description="Dependencies not on the calendar")
    suggested_time: Optional[datetime] = Field(None, description="Advisory alternative start time")


class SuggestionAction(str, Enum):
    """Kind of action a suggestion recommends."""
    EXTEND_HOURS = "extend_hours"
    ADJUST_DEADLINES = "adjust_deadlines"


class Suggestion(BaseModel):
    """Advisory text emitted after a pass."""
    
    message: str = Field(..., description="Suggestion text")
    action_type: SuggestionAction = Field(..., description="Recommended action")
    data: Dict[str, int] = Field(default_factory=dict, description="Structured payload")


class SchedulingOutcome(BaseModel):
    """Result of one scheduling pass."""
    
    now: datetime = Field(..., description="Reference time the pass was computed against")
    placements: List[Placement] = Field(default_factory=list)
    unscheduled_item_ids: List[str] = Field(default_factory=list)
    failures: List[PlacementFailure] = Field(default_factory=list)
    suggestions: List[Suggestion] = Field(default_factory=list)
    
    @property
    def success(self) -> bool:
        """True when every attempted item was placed."""
        return not self.unscheduled_item_ids
    
    def as_intervals(self) -> List[ExistingInterval]:
        """Placements as occupied intervals, for folding into a later call."""
        return [placement.to_interval() for placement in self.placements]
    
    def summary(self) -> str:
        """One-line description of the pass."""
        if self.success:
            return f"Successfully scheduled {len(self.placements)} items."
        return (
            f"Scheduled {len(self.placements)} items. "
            f"{len(self.unscheduled_item_ids)} items couldn't be scheduled."
        )
