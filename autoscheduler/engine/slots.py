"""Slot search for AutoScheduler.

Walks a search window day by day, clips each day to its working hours, and
tests candidate slots at a fixed step against the conflict set.
"""

import logging
from datetime import datetime, time, timedelta, timezone, tzinfo
from typing import List, Optional, Tuple
from autoscheduler.engine.conflicts import ConflictSet
from autoscheduler.models.item import SchedulableItem
from autoscheduler.models.outcome import TimeSlot
from autoscheduler.models.settings import SchedulerSettings
from autoscheduler.models.constants import SLOT_STEP_MINUTES

logger = logging.getLogger(__name__)


def search_window(item: SchedulableItem, now: datetime, horizon_days: int) -> Tuple[datetime, datetime]:
    """Get the [start, end) range an item may be placed in.
    
    Starts at the later of now and the item's creation time, and ends at the
    deadline, or horizon_days after the start when there is no deadline.
    """
    start = max(now, item.created_at)
    end = item.deadline if item.deadline is not None else start + timedelta(days=horizon_days)
    return start, end


def round_up_to_granularity(dt: datetime, step_minutes: int = SLOT_STEP_MINUTES) -> datetime:
    """Round datetime up to the next step boundary counted from midnight.
    
    Args:
        dt: Datetime to round
        step_minutes: Step size in minutes
        
    Returns:
        dt itself if already on a boundary, otherwise the next boundary
    """
    midnight = dt.replace(hour=0, minute=0, second=0, microsecond=0)
    step = timedelta(minutes=step_minutes)
    remainder = (dt - midnight) % step
    if not remainder:
        return dt
    return dt + (step - remainder)


def to_local(dt: datetime, zone: Optional[tzinfo]) -> datetime:
    """Express dt on the wall clock of zone (unchanged when zone is None)."""
    return dt.astimezone(zone) if zone is not None else dt


def _instant(day, at: time, zone: Optional[tzinfo], fallback: Optional[tzinfo]) -> datetime:
    """Turn a wall-clock time on a day into a point on the scheduling timeline.

    With a zone the result is in UTC, so later arithmetic counts real minutes
    across DST changes.
    """
    if zone is None:
        return datetime.combine(day, at, tzinfo=fallback)
    return datetime.combine(day, at, tzinfo=zone).astimezone(timezone.utc)


def working_ranges(
    window_start: datetime,
    window_end: datetime,
    settings: SchedulerSettings,
    zone: Optional[tzinfo] = None,
) -> List[Tuple[datetime, datetime]]:
    """Get each day's working range clipped to the search window, earliest first.

    Day boundaries and working hours are read on the wall clock of zone.
    When zone is given, the window must be timezone-aware and the ranges
    come back in UTC.
    """
    ranges = []
    day = to_local(window_start, zone).date()
    last_day = to_local(window_end, zone).date()

    while day <= last_day:
        hours = settings.hours_for(day.weekday())
        if hours is not None:
            work_start = _instant(day, hours.start, zone, window_start.tzinfo)
            work_end = _instant(day, hours.end, zone, window_start.tzinfo)
            range_start = max(work_start, window_start)
            range_end = min(work_end, window_end)
            if range_start < range_end:
                ranges.append((range_start, range_end))
        day += timedelta(days=1)

    return ranges


def find_slots_in_range(
    range_start: datetime,
    range_end: datetime,
    duration_min: int,
    conflicts: ConflictSet,
    buffer_min: int = 0,
    step_min: int = SLOT_STEP_MINUTES,
) -> List[TimeSlot]:
    """Find conflict-free slots inside one working range.
    
    A candidate at start s is kept when [s - buffer, s + duration + buffer)
    overlaps nothing in the conflict set and s + duration + buffer fits in
    the range. Candidates are tested every step_min minutes.
    """
    slots = []
    duration = timedelta(minutes=duration_min)
    buffer = timedelta(minutes=buffer_min)
    step = timedelta(minutes=step_min)
    current = round_up_to_granularity(range_start, step_min)
    
    while current + duration + buffer <= range_end:
        if conflicts.is_free(current - buffer, current + duration + buffer):
            slots.append(TimeSlot(start=current, end=current + duration))
        current += step
    
    return slots


def find_available_slots(
    window_start: datetime,
    window_end: datetime,
    duration_min: int,
    settings: SchedulerSettings,
    conflicts: ConflictSet,
    zone: Optional[tzinfo] = None,
) -> List[TimeSlot]:
    """Find every conflict-free slot in the search window.
    
    Slots come back in enumeration order: earliest day first, earliest time
    first within a day. With a zone, the window and conflicts must be in UTC
    and the slots are too.
    """
    slots = []
    for range_start, range_end in working_ranges(window_start, window_end, settings, zone):
        slots.extend(
            find_slots_in_range(
                range_start,
                range_end,
                duration_min,
                conflicts,
                buffer_min=settings.buffer_minutes,
                step_min=settings.slot_step_minutes,
            )
        )
    logger.debug(
        f"Found {len(slots)} candidate slots for {duration_min} min between {window_start} and {window_end}"
    )
    return slots
