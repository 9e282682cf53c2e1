"""Slot scoring for AutoScheduler.

Scores are only meaningful relative to other candidates for the same item.
"""

from datetime import tzinfo
from typing import Optional, Sequence
from autoscheduler.engine.conflicts import ConflictSet
from autoscheduler.engine.slots import to_local
from autoscheduler.models.item import SchedulableItem, Priority
from autoscheduler.models.outcome import TimeSlot
from autoscheduler.models.constants import (
    MORNING_CUTOFF_HOUR,
    EARLY_AFTERNOON_CUTOFF_HOUR,
    MORNING_BONUS,
    EARLY_AFTERNOON_BONUS,
    DEADLINE_SCORE_DIVISOR_HOURS,
    DEADLINE_SCORE_MAX,
    BUFFER_SCORE_DIVISOR_MINUTES,
    BUFFER_SCORE_MAX,
    DEFAULT_BUFFER_AFTER_MINUTES,
    BASE_CONFIDENCE,
    EARLY_HIGH_PRIORITY_BONUS,
    DISTANT_DEADLINE_BONUS,
    DISTANT_DEADLINE_HOURS,
    ODD_HOUR_PENALTY,
    EARLIEST_COMFORTABLE_HOUR,
    LATEST_COMFORTABLE_HOUR,
)


def _hours_until_deadline(slot: TimeSlot, item: SchedulableItem) -> float:
    return (item.deadline - slot.start).total_seconds() / 3600


def buffer_after(slot: TimeSlot, conflicts: ConflictSet) -> float:
    """Minutes between the slot's end and the next interval starting at or after it.
    
    Returns 60 when nothing follows the slot.
    """
    next_start = conflicts.next_start_after(slot.end)
    if next_start is None:
        return DEFAULT_BUFFER_AFTER_MINUTES
    return (next_start - slot.end).total_seconds() / 60


def score_slot(
    slot: TimeSlot,
    item: SchedulableItem,
    conflicts: ConflictSet,
    zone: Optional[tzinfo] = None,
) -> float:
    """Score a candidate slot for an item.
    
    - High priority: +10 before noon, +5 before 15:00
    - Deadline: +hours_until_deadline / 24, at most +10
    - Trailing gap: +minutes_free_after / 30, at most +5
    
    Args:
        slot: Candidate slot
        item: Item being placed
        conflicts: Current conflict set
        zone: Zone whose wall clock the hour preferences are read on
        
    Returns:
        Unbounded score, higher is better
    """
    score = 0.0
    
    if item.priority == Priority.HIGH:
        hour = to_local(slot.start, zone).hour
        if hour < MORNING_CUTOFF_HOUR:
            score += MORNING_BONUS
        elif hour < EARLY_AFTERNOON_CUTOFF_HOUR:
            score += EARLY_AFTERNOON_BONUS
    
    if item.deadline is not None:
        hours_to_deadline = _hours_until_deadline(slot, item)
        if hours_to_deadline > 0:
            score += min(hours_to_deadline / DEADLINE_SCORE_DIVISOR_HOURS, DEADLINE_SCORE_MAX)
    
    score += min(buffer_after(slot, conflicts) / BUFFER_SCORE_DIVISOR_MINUTES, BUFFER_SCORE_MAX)
    
    return score


def select_best_slot(
    slots: Sequence[TimeSlot],
    item: SchedulableItem,
    conflicts: ConflictSet,
    zone: Optional[tzinfo] = None,
) -> TimeSlot:
    """Pick the highest-scoring slot; the earliest found wins ties."""
    best = slots[0]
    best_score = score_slot(best, item, conflicts, zone)
    for slot in slots[1:]:
        score = score_slot(slot, item, conflicts, zone)
        if score > best_score:
            best, best_score = slot, score
    return best


def calculate_confidence(slot: TimeSlot, item: SchedulableItem, zone: Optional[tzinfo] = None) -> float:
    """Describe how favorable a chosen slot is, in [0, 1]."""
    confidence = BASE_CONFIDENCE
    hour = to_local(slot.start, zone).hour
    
    if item.priority == Priority.HIGH and hour < MORNING_CUTOFF_HOUR:
        confidence += EARLY_HIGH_PRIORITY_BONUS
    
    if item.deadline is not None and _hours_until_deadline(slot, item) > DISTANT_DEADLINE_HOURS:
        confidence += DISTANT_DEADLINE_BONUS
    
    if hour < EARLIEST_COMFORTABLE_HOUR or hour > LATEST_COMFORTABLE_HOUR:
        confidence -= ODD_HOUR_PENALTY
    
    return round(max(0.0, min(1.0, confidence)), 2)
