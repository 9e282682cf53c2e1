"""Conflict set for AutoScheduler.

The conflict set is every occupied interval a candidate slot must avoid:
intervals the caller passed in plus placements committed earlier in the
same pass. It is immutable; committing a placement returns a new set.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Tuple
from autoscheduler.models.interval import ExistingInterval


class ConflictSet:
    """Immutable, ordered collection of occupied intervals."""
    
    __slots__ = ("_intervals",)
    
    def __init__(self, intervals: Iterable[ExistingInterval] = ()):
        self._intervals: Tuple[ExistingInterval, ...] = tuple(intervals)
    
    def __len__(self) -> int:
        return len(self._intervals)
    
    def __iter__(self):
        return iter(self._intervals)
    
    @property
    def intervals(self) -> Tuple[ExistingInterval, ...]:
        return self._intervals
    
    def with_interval(self, interval: ExistingInterval) -> "ConflictSet":
        """Return a new set with the interval appended."""
        return ConflictSet(self._intervals + (interval,))
    
    def find_conflicts(self, start: datetime, end: datetime) -> List[ExistingInterval]:
        """Get every interval overlapping the half-open range [start, end)."""
        return [interval for interval in self._intervals if interval.overlaps(start, end)]
    
    def is_free(self, start: datetime, end: datetime) -> bool:
        """Check that nothing overlaps [start, end)."""
        return not any(interval.overlaps(start, end) for interval in self._intervals)
    
    def has_item(self, item_id: str) -> bool:
        """Check whether an interval tagged with the item ID is on the calendar."""
        return any(interval.item_id == item_id for interval in self._intervals)
    
    def missing_items(self, item_ids: Iterable[str]) -> List[str]:
        """Get the item IDs with no tagged interval, in the order given, each once."""
        return [item_id for item_id in dict.fromkeys(item_ids) if not self.has_item(item_id)]
    
    def next_start_after(self, moment: datetime) -> Optional[datetime]:
        """Get the earliest interval start at or after moment, if any."""
        starts = [interval.start for interval in self._intervals if interval.start >= moment]
        return min(starts) if starts else None
