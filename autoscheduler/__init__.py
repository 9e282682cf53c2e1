"""AutoScheduler: places flexible work items into free calendar time."""

__version__ = "0.1.0"
