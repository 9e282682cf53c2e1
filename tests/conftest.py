"""Pytest fixtures and configuration for AutoScheduler tests."""

import pytest
from datetime import datetime, time

from autoscheduler.models.interval import ExistingInterval, IntervalKind
from autoscheduler.models.item import SchedulableItem, Priority, ItemStatus
from autoscheduler.models.settings import SchedulerSettings, WorkingHours


@pytest.fixture
def now():
    """Fixed reference time: Monday 2024-01-01 08:00."""
    return datetime(2024, 1, 1, 8, 0, 0)


@pytest.fixture
def weekday_hours():
    """09:00-17:00 working window."""
    return WorkingHours(start=time(9, 0), end=time(17, 0))


@pytest.fixture
def settings(weekday_hours):
    """Monday-Friday 09:00-17:00 with no buffer."""
    return SchedulerSettings(working_hours={day: weekday_hours for day in range(5)}, buffer_minutes=0)


@pytest.fixture
def buffered_settings(weekday_hours):
    """Monday-Friday 09:00-17:00 with a 15 minute buffer."""
    return SchedulerSettings(working_hours={day: weekday_hours for day in range(5)}, buffer_minutes=15)


@pytest.fixture
def sample_item_base(now):
    """Base item data for creating test items.
    
    Returns a dict with default item attributes that can be overridden.
    """
    return {
        "id": "item-1",
        "title": "Test Item",
        "description": None,
        "category": "work",
        "priority": Priority.MEDIUM,
        "status": ItemStatus.TODO,
        "estimated_duration_min": 60,
        "deadline": None,
        "created_at": now,
        "dependencies": [],
        "is_flexible": True,
    }


@pytest.fixture
def sample_item(sample_item_base):
    """Create a sample SchedulableItem for testing."""
    return SchedulableItem(**sample_item_base)


@pytest.fixture
def high_priority_item(sample_item_base):
    """Create a high priority item."""
    return SchedulableItem(**{**sample_item_base, "id": "high", "title": "High", "priority": Priority.HIGH})


@pytest.fixture
def low_priority_item(sample_item_base):
    """Create a low priority item."""
    return SchedulableItem(**{**sample_item_base, "id": "low", "title": "Low", "priority": Priority.LOW})


@pytest.fixture
def all_day_meeting():
    """Meeting filling Monday 2024-01-01 09:00-17:00."""
    return ExistingInterval(
        id="meeting-1",
        title="Offsite",
        start=datetime(2024, 1, 1, 9, 0),
        end=datetime(2024, 1, 1, 17, 0),
        kind=IntervalKind.MEETING,
    )
