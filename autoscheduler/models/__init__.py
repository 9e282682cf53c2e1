"""Data models for AutoScheduler."""

from autoscheduler.models.item import SchedulableItem, Priority, ItemStatus
from autoscheduler.models.interval import ExistingInterval, IntervalKind
from autoscheduler.models.settings import SchedulerSettings, WorkingHours
from autoscheduler.models.outcome import (
    TimeSlot,
    Placement,
    PlacementFailure,
    FailureReason,
    Suggestion,
    SuggestionAction,
    SchedulingOutcome,
)

__all__ = [
    "SchedulableItem",
    "Priority",
    "ItemStatus",
    "ExistingInterval",
    "IntervalKind",
    "SchedulerSettings",
    "WorkingHours",
    "TimeSlot",
    "Placement",
    "PlacementFailure",
    "FailureReason",
    "Suggestion",
    "SuggestionAction",
    "SchedulingOutcome",
]
