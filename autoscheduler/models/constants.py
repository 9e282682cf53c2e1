"""Constants for AutoScheduler.

This module centralizes all magic numbers and default values used by the scheduling engine.
"""

# Ranking weights: score = 10 * priority + 5 * urgency + 3 * dependents
PRIORITY_FACTOR = 10
URGENCY_FACTOR = 5
DEPENDENTS_FACTOR = 3

PRIORITY_WEIGHTS = {
    "high": 3,
    "medium": 2,
    "low": 1,
}

# Urgency by hours until deadline
URGENCY_OVERDUE = 10
URGENCY_WITHIN_24H = 8
URGENCY_WITHIN_48H = 6
URGENCY_WITHIN_WEEK = 4
URGENCY_LATER = 2
URGENCY_NO_DEADLINE = 0

# Search
DEFAULT_SEARCH_HORIZON_DAYS = 14
SLOT_STEP_MINUTES = 15

# Slot scoring
MORNING_CUTOFF_HOUR = 12
EARLY_AFTERNOON_CUTOFF_HOUR = 15
MORNING_BONUS = 10
EARLY_AFTERNOON_BONUS = 5
DEADLINE_SCORE_DIVISOR_HOURS = 24
DEADLINE_SCORE_MAX = 10
BUFFER_SCORE_DIVISOR_MINUTES = 30
BUFFER_SCORE_MAX = 5
DEFAULT_BUFFER_AFTER_MINUTES = 60

# Confidence
BASE_CONFIDENCE = 0.7
EARLY_HIGH_PRIORITY_BONUS = 0.2
DISTANT_DEADLINE_BONUS = 0.1
DISTANT_DEADLINE_HOURS = 48
ODD_HOUR_PENALTY = 0.1
EARLIEST_COMFORTABLE_HOUR = 8
LATEST_COMFORTABLE_HOUR = 18

# Settings defaults
DEFAULT_WORK_START = "09:00"
DEFAULT_WORK_END = "17:00"
DEFAULT_WORK_DAYS = (0, 1, 2, 3, 4)  # Monday-Friday
DEFAULT_BUFFER_MINUTES = 5
DEFAULT_SUGGESTION_HOUR = 9
