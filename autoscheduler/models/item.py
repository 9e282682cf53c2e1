"""SchedulableItem data model for AutoScheduler."""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class Priority(str, Enum):
    """Item priority enumeration."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ItemStatus(str, Enum):
    """Item status enumeration."""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class SchedulableItem(BaseModel):
    """A unit of work the scheduler may place on the calendar."""
    
    id: str = Field(..., min_length=1, description="Unique item identifier")
    title: str = Field(..., description="Display title")
    description: Optional[str] = Field(None, description="Item notes")
    category: str = Field("general", description="Free-text category")
    priority: Priority = Field(Priority.MEDIUM, description="Item priority")
    status: ItemStatus = Field(ItemStatus.TODO, description="Item status")
    estimated_duration_min: int = Field(..., gt=0, description="Estimated duration in minutes")
    deadline: Optional[datetime] = Field(None, description="Item deadline")
    created_at: datetime = Field(..., description="Creation timestamp (lower bound for the search window)")
    dependencies: List[str] = Field(
        default_factory=list,
        description="IDs of items that must already be on the calendar before this one is placed",
    )
    is_flexible: bool = Field(True, description="Whether the scheduler may place this item")
    
    class Config:
        """Pydantic configuration."""
        frozen = True
