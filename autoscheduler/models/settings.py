"""Scheduler settings models for AutoScheduler."""

from datetime import time
from typing import Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from pydantic import BaseModel, Field, field_validator, model_validator

from autoscheduler.errors import ConfigurationError
from autoscheduler.models.constants import (
    DEFAULT_BUFFER_MINUTES,
    DEFAULT_SEARCH_HORIZON_DAYS,
    DEFAULT_SUGGESTION_HOUR,
    DEFAULT_WORK_DAYS,
    SLOT_STEP_MINUTES,
)


class WorkingHours(BaseModel):
    """Working-hour range for a single weekday."""
    
    start: time = Field(..., description="Start of the working window (time of day)")
    end: time = Field(..., description="End of the working window (time of day)")
    
    class Config:
        """Pydantic configuration."""
        frozen = True
    
    @model_validator(mode="after")
    def _check_range(self):
        if self.end <= self.start:
            raise ValueError(f"working hours end ({self.end}) must be after start ({self.start})")
        return self


class SchedulerSettings(BaseModel):
    """Configuration for a scheduling pass.
    
    Weekdays are keyed 0 (Monday) through 6 (Sunday), matching datetime.weekday().
    A weekday with no entry has no working window and receives no placements.
    """
    
    working_hours: Dict[int, WorkingHours] = Field(
        default_factory=dict,
        description="Working window per weekday (0=Monday .. 6=Sunday)",
    )
    buffer_minutes: int = Field(DEFAULT_BUFFER_MINUTES, ge=0, description="Gap kept around each placement")
    time_zone: Optional[str] = Field(None, description="IANA time zone used for day boundaries")
    search_horizon_days: int = Field(
        DEFAULT_SEARCH_HORIZON_DAYS, gt=0, description="Search window length for items without a deadline"
    )
    slot_step_minutes: int = Field(SLOT_STEP_MINUTES, gt=0, le=60, description="Candidate slot increment")
    suggestion_hour: int = Field(
        DEFAULT_SUGGESTION_HOUR, ge=0, le=23, description="Hour of the next-day fallback suggestion"
    )
    
    class Config:
        """Pydantic configuration."""
        frozen = True
    
    @field_validator("working_hours")
    @classmethod
    def _check_weekdays(cls, value: Dict[int, WorkingHours]) -> Dict[int, WorkingHours]:
        for weekday in value:
            if not 0 <= weekday <= 6:
                raise ValueError(f"weekday must be between 0 (Monday) and 6 (Sunday), got {weekday}")
        return value
    
    @field_validator("time_zone")
    @classmethod
    def _check_time_zone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown time zone: {value}") from e
        return value
    
    @classmethod
    def default(cls) -> "SchedulerSettings":
        """Monday-Friday 09:00-17:00 with a 5 minute buffer."""
        hours = WorkingHours(start=time(9, 0), end=time(17, 0))
        return cls(working_hours={day: hours for day in DEFAULT_WORK_DAYS})
    
    def hours_for(self, weekday: int) -> Optional[WorkingHours]:
        """Get the working window for a weekday, or None if it is a day off."""
        return self.working_hours.get(weekday)
    
    def zone(self) -> Optional[ZoneInfo]:
        """Get the configured time zone, if any."""
        return ZoneInfo(self.time_zone) if self.time_zone else None
    
    def ensure_usable(self) -> None:
        """Raise ConfigurationError if some search could never reach a working day.
        
        A horizon shorter than a week must contain a working day whichever
        weekday the search starts on.
        """
        if not self.working_hours:
            raise ConfigurationError("working hours are not configured for any weekday")
        if self.search_horizon_days >= 7:
            return
        for first in range(7):
            reachable = {(first + offset) % 7 for offset in range(self.search_horizon_days + 1)}
            if not reachable & set(self.working_hours):
                raise ConfigurationError(
                    f"search horizon of {self.search_horizon_days} days can miss every working day "
                    f"when starting on weekday {first}"
                )
