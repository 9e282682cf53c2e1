"""Scheduling engine for AutoScheduler."""

from autoscheduler.engine.conflicts import ConflictSet
from autoscheduler.engine.ranking import rank_items, ranking_score
from autoscheduler.engine.slots import find_available_slots, search_window
from autoscheduler.engine.scoring import score_slot, select_best_slot, calculate_confidence
from autoscheduler.engine.suggestions import generate_suggestions, suggest_alternative_time
from autoscheduler.engine.scheduler import schedule_all, place_item, is_schedulable

__all__ = [
    "ConflictSet",
    "rank_items",
    "ranking_score",
    "find_available_slots",
    "search_window",
    "score_slot",
    "select_best_slot",
    "calculate_confidence",
    "generate_suggestions",
    "suggest_alternative_time",
    "schedule_all",
    "place_item",
    "is_schedulable",
]
