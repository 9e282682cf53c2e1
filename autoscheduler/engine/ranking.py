"""Urgency ranking for AutoScheduler.

Orders items by a weighted score of priority, deadline urgency and how many
other items depend on them. The order decides which item gets first pick of
free time.
"""

from datetime import datetime, timedelta
from typing import List, Optional, Sequence
from autoscheduler.models.item import SchedulableItem, Priority
from autoscheduler.models.constants import (
    PRIORITY_FACTOR,
    URGENCY_FACTOR,
    DEPENDENTS_FACTOR,
    PRIORITY_WEIGHTS,
    URGENCY_OVERDUE,
    URGENCY_WITHIN_24H,
    URGENCY_WITHIN_48H,
    URGENCY_WITHIN_WEEK,
    URGENCY_LATER,
    URGENCY_NO_DEADLINE,
)


def priority_weight(priority: Priority) -> int:
    """Get the ranking weight for a priority (high=3, medium=2, low=1)."""
    return PRIORITY_WEIGHTS[Priority(priority).value]


def urgency_score(item: SchedulableItem, now: datetime) -> int:
    """Score how pressing an item's deadline is.
    
    Args:
        item: Item to score
        now: Reference time of the scheduling pass
        
    Returns:
        10 if overdue, 8 within 24h, 6 within 48h, 4 within a week,
        2 beyond that, 0 without a deadline
    """
    if item.deadline is None:
        return URGENCY_NO_DEADLINE
    
    time_until_deadline = item.deadline - now
    if time_until_deadline < timedelta(0):
        return URGENCY_OVERDUE
    if time_until_deadline < timedelta(hours=24):
        return URGENCY_WITHIN_24H
    if time_until_deadline < timedelta(hours=48):
        return URGENCY_WITHIN_48H
    if time_until_deadline < timedelta(days=7):
        return URGENCY_WITHIN_WEEK
    return URGENCY_LATER


def count_dependents(item: SchedulableItem, batch: Sequence[SchedulableItem]) -> int:
    """Count the other items in the batch that list this item as a dependency."""
    return sum(1 for other in batch if other.id != item.id and item.id in other.dependencies)


def ranking_score(item: SchedulableItem, batch: Sequence[SchedulableItem], now: datetime) -> int:
    """Weighted ranking score: 10 * priority + 5 * urgency + 3 * dependents."""
    return (
        PRIORITY_FACTOR * priority_weight(item.priority)
        + URGENCY_FACTOR * urgency_score(item, now)
        + DEPENDENTS_FACTOR * count_dependents(item, batch)
    )


def rank_items(
    items: Sequence[SchedulableItem],
    now: datetime,
    batch: Optional[Sequence[SchedulableItem]] = None,
) -> List[SchedulableItem]:
    """Rank items by descending score.
    
    The sort is stable, so items with equal scores keep their input order.
    This function is deterministic - same inputs always produce same outputs.
    
    Args:
        items: Items to rank
        now: Reference time of the scheduling pass
        batch: Items consulted when counting dependents (defaults to items)
        
    Returns:
        Items sorted from first to last to be scheduled
    """
    if batch is None:
        batch = items
    scores = [ranking_score(item, batch, now) for item in items]
    order = sorted(range(len(items)), key=lambda i: -scores[i])
    return [items[i] for i in order]
