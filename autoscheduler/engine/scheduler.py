"""Scheduling algorithm for AutoScheduler.

Places flexible items into free working time in a single greedy pass:
items are ranked once, then placed one at a time, and each placement is
folded into the conflict set seen by the items after it. Earlier
placements are never revisited when a later item fails.
"""

import logging
from collections import Counter
from datetime import datetime, timezone, tzinfo
from typing import Iterable, List, Optional, Sequence, Tuple
from autoscheduler.errors import InvalidInputError, SchedulerError
from autoscheduler.engine.conflicts import ConflictSet
from autoscheduler.engine.ranking import rank_items
from autoscheduler.engine.scoring import calculate_confidence, select_best_slot
from autoscheduler.engine.slots import find_available_slots, search_window, to_local
from autoscheduler.engine.suggestions import generate_suggestions, suggest_alternative_time
from autoscheduler.models.interval import ExistingInterval
from autoscheduler.models.item import SchedulableItem, ItemStatus
from autoscheduler.models.outcome import (
    FailureReason,
    Placement,
    PlacementFailure,
    SchedulingOutcome,
)
from autoscheduler.models.settings import SchedulerSettings

logger = logging.getLogger(__name__)

NO_SLOTS_REASON = "no available time slots found"
DEPENDENCIES_REASON_PREFIX = "dependencies not satisfied"


def is_schedulable(item: SchedulableItem) -> bool:
    """Check whether the scheduler may place an item (flexible and not completed)."""
    return item.is_flexible and item.status != ItemStatus.COMPLETED


def schedule_all(
    items: Sequence[SchedulableItem],
    settings: SchedulerSettings,
    existing_intervals: Iterable[ExistingInterval] = (),
    now: Optional[datetime] = None,
) -> SchedulingOutcome:
    """Schedule every flexible item into free working time.
    
    The caller's collections are never modified. Items that cannot be placed
    are reported in the outcome rather than raised. Aware inputs are scheduled
    on a UTC timeline and placements are reported in the calendar zone.
    
    Args:
        items: Items to schedule; rigid and completed items are skipped
        settings: Working hours, buffer and search parameters
        existing_intervals: Calendar time that is already occupied
        now: Reference time for urgency and the search window (defaults to now)
        
    Returns:
        SchedulingOutcome with placements, failures and suggestions
        
    Raises:
        ConfigurationError: If no weekday has working hours
        InvalidInputError: If items or intervals are inconsistent
    """
    settings.ensure_usable()
    items = list(items)
    intervals = list(existing_intervals)
    
    aware = _validate_inputs(items, intervals, now, settings)
    if now is None:
        now = _current_time(settings, aware)
    zone = _calendar_zone(settings, now)
    items, intervals, now = _to_utc(items, intervals, now, zone)
    
    outcome = SchedulingOutcome(now=to_local(now, zone))
    if not items:
        return outcome
    
    schedulable = [item for item in items if is_schedulable(item)]
    ranked = rank_items(schedulable, now, batch=items)
    logger.debug(f"Ranked {len(ranked)} of {len(items)} items for scheduling")
    
    conflicts = ConflictSet(intervals)
    for item in ranked:
        placement, failure = place_item(item, conflicts, now, settings, zone)
        if placement is not None:
            conflicts = _commit(conflicts, placement)
            outcome.placements.append(placement)
        else:
            logger.warning(f"Could not schedule item {item.id}: {failure.reason}")
            outcome.unscheduled_item_ids.append(item.id)
            outcome.failures.append(failure)
    
    outcome.suggestions = generate_suggestions(len(outcome.unscheduled_item_ids), items, now)
    logger.info(
        f"Scheduled {len(outcome.placements)} items, {len(outcome.unscheduled_item_ids)} unscheduled"
    )
    return outcome


def place_item(
    item: SchedulableItem,
    conflicts: ConflictSet,
    now: datetime,
    settings: SchedulerSettings,
    zone: Optional[tzinfo] = None,
) -> Tuple[Optional[Placement], Optional[PlacementFailure]]:
    """Attempt to place one item against the current conflict set.
    
    With a zone, item, conflict and now datetimes must be in UTC. Day
    boundaries and hour preferences are read in the zone, and the
    placement is returned on its wall clock.
    
    Returns exactly one of (placement, None) or (None, failure).
    """
    missing = conflicts.missing_items(item.dependencies)
    if missing:
        return None, PlacementFailure(
            item_id=item.id,
            code=FailureReason.DEPENDENCIES_NOT_SATISFIED,
            reason=f"{DEPENDENCIES_REASON_PREFIX}: {', '.join(missing)}",
            missing_dependencies=missing,
        )
    
    window_start, window_end = search_window(item, now, settings.search_horizon_days)
    slots = find_available_slots(window_start, window_end, item.estimated_duration_min, settings, conflicts, zone)
    if not slots:
        return None, PlacementFailure(
            item_id=item.id,
            code=FailureReason.NO_AVAILABLE_SLOTS,
            reason=NO_SLOTS_REASON,
            suggested_time=suggest_alternative_time(to_local(now, zone), settings.suggestion_hour),
        )
    
    best = select_best_slot(slots, item, conflicts, zone)
    logger.debug(f"Placing item {item.id} at {best.start} (picked from {len(slots)} slots)")
    return Placement(
        item_id=item.id,
        title=item.title,
        start=to_local(best.start, zone),
        end=to_local(best.end, zone),
        confidence=calculate_confidence(best, item, zone),
    ), None


def _commit(conflicts: ConflictSet, placement: Placement) -> ConflictSet:
    interval = placement.to_interval()
    if interval.start.tzinfo is not None:
        interval = interval.model_copy(
            update={"start": interval.start.astimezone(timezone.utc), "end": interval.end.astimezone(timezone.utc)}
        )
    clashes = conflicts.find_conflicts(interval.start, interval.end)
    if clashes:
        raise SchedulerError(
            f"placement for {placement.item_id} overlaps {', '.join(c.id for c in clashes)}"
        )
    return conflicts.with_interval(interval)


def _datetimes(items: Sequence[SchedulableItem], intervals: Sequence[ExistingInterval]) -> List[datetime]:
    values = []
    for item in items:
        values.append(item.created_at)
        if item.deadline is not None:
            values.append(item.deadline)
    for interval in intervals:
        values.extend((interval.start, interval.end))
    return values


def _validate_inputs(
    items: Sequence[SchedulableItem],
    intervals: Sequence[ExistingInterval],
    now: Optional[datetime],
    settings: SchedulerSettings,
) -> bool:
    """Reject inconsistent inputs before any scheduling work.
    
    Returns:
        True if the inputs use timezone-aware datetimes
    """
    duplicates = sorted(item_id for item_id, count in Counter(item.id for item in items).items() if count > 1)
    if duplicates:
        raise InvalidInputError(f"duplicate item ids: {', '.join(duplicates)}")
    
    values = _datetimes(items, intervals)
    if now is not None:
        values.append(now)
    awareness = {value.tzinfo is not None for value in values}
    if len(awareness) > 1:
        raise InvalidInputError("cannot mix timezone-aware and naive datetimes")
    aware = awareness == {True}
    if settings.time_zone and values and not aware:
        raise InvalidInputError(f"time zone {settings.time_zone} is configured, datetimes must be timezone-aware")
    return aware


def _current_time(settings: SchedulerSettings, aware: bool) -> datetime:
    zone = settings.zone()
    if zone is not None:
        return datetime.now(zone)
    if aware:
        return datetime.now(timezone.utc)
    return datetime.utcnow()


def _calendar_zone(settings: SchedulerSettings, now: datetime) -> Optional[tzinfo]:
    """Pick the zone whose wall clock defines days and working hours.
    
    The configured zone wins; otherwise aware inputs follow now's zone and
    naive inputs have none.
    """
    zone = settings.zone()
    if zone is not None:
        return zone
    return now.tzinfo


def _to_utc(
    items: List[SchedulableItem],
    intervals: List[ExistingInterval],
    now: datetime,
    zone: Optional[tzinfo],
) -> Tuple[List[SchedulableItem], List[ExistingInterval], datetime]:
    """Move every datetime onto one UTC timeline.
    
    Datetimes sharing a ZoneInfo compare and subtract on the wall clock, which
    is wrong across DST changes, so the pass itself only ever sees UTC.
    """
    if zone is None:
        return items, intervals, now
    
    items = [
        item.model_copy(
            update={
                "created_at": item.created_at.astimezone(timezone.utc),
                "deadline": item.deadline.astimezone(timezone.utc) if item.deadline is not None else None,
            }
        )
        for item in items
    ]
    intervals = [
        interval.model_copy(
            update={"start": interval.start.astimezone(timezone.utc), "end": interval.end.astimezone(timezone.utc)}
        )
        for interval in intervals
    ]
    return items, intervals, now.astimezone(timezone.utc)
