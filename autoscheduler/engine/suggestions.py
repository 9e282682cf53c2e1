"""Failure suggestions for AutoScheduler."""

from datetime import datetime, time, timedelta
from typing import List, Sequence
from autoscheduler.models.item import SchedulableItem
from autoscheduler.models.outcome import Suggestion, SuggestionAction
from autoscheduler.models.constants import DEFAULT_SUGGESTION_HOUR


def suggest_alternative_time(now: datetime, hour: int = DEFAULT_SUGGESTION_HOUR) -> datetime:
    """Get the fallback time offered for an item with no free slot.
    
    This is the next day at a fixed hour. It is advisory only and is not
    checked against the calendar.
    """
    return datetime.combine(now.date() + timedelta(days=1), time(hour, 0), tzinfo=now.tzinfo)


def generate_suggestions(
    unscheduled_count: int,
    items: Sequence[SchedulableItem],
    now: datetime,
) -> List[Suggestion]:
    """Build post-pass suggestions.
    
    Args:
        unscheduled_count: Number of items the pass could not place
        items: Every item handed to the pass, flexible or not
        now: Reference time of the pass
        
    Returns:
        Zero, one or two suggestions
    """
    suggestions = []
    
    if unscheduled_count > 0:
        suggestions.append(
            Suggestion(
                message=(
                    f"{unscheduled_count} items couldn't be scheduled. "
                    "Consider extending working hours or reducing the load."
                ),
                action_type=SuggestionAction.EXTEND_HOURS,
                data={"unscheduled_count": unscheduled_count},
            )
        )
    
    overdue_count = sum(1 for item in items if item.deadline is not None and item.deadline < now)
    if overdue_count > 0:
        suggestions.append(
            Suggestion(
                message=f"{overdue_count} items are overdue. Consider adjusting deadlines or priorities.",
                action_type=SuggestionAction.ADJUST_DEADLINES,
                data={"overdue_count": overdue_count},
            )
        )
    
    return suggestions
