"""Exceptions raised by AutoScheduler.

Only setup faults are raised. An item that cannot be placed is reported in the
SchedulingOutcome instead.
"""


class SchedulerError(Exception):
    """Base class for scheduler errors."""


class ConfigurationError(SchedulerError):
    """Scheduler settings cannot produce any placement."""


class InvalidInputError(SchedulerError):
    """Items or intervals handed to the scheduler are inconsistent."""
