"""Environment-driven settings for AutoScheduler.

Reads working hours and search parameters from environment variables,
loading a local .env file first when one exists.
"""

import logging
import os
from datetime import time
from typing import Optional, Tuple

from dotenv import load_dotenv
from pydantic import ValidationError

from autoscheduler.errors import ConfigurationError
from autoscheduler.models.constants import (
    DEFAULT_BUFFER_MINUTES,
    DEFAULT_SEARCH_HORIZON_DAYS,
    DEFAULT_WORK_DAYS,
    DEFAULT_WORK_END,
    DEFAULT_WORK_START,
)
from autoscheduler.models.settings import SchedulerSettings, WorkingHours

load_dotenv()

logger = logging.getLogger(__name__)


def _parse_time(name: str, value: str) -> time:
    try:
        hours, minutes = value.strip().split(":")
        return time(int(hours), int(minutes))
    except ValueError as e:
        raise ConfigurationError(f"{name} must be HH:MM, got {value!r}") from e


def _parse_days(name: str, value: str) -> Tuple[int, ...]:
    try:
        days = tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError as e:
        raise ConfigurationError(f"{name} must be comma-separated weekday numbers, got {value!r}") from e
    if not days:
        raise ConfigurationError(f"{name} must list at least one weekday")
    return days


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from e


def settings_from_env() -> SchedulerSettings:
    """Build SchedulerSettings from AUTOSCHEDULER_* environment variables.
    
    Variables:
        AUTOSCHEDULER_WORK_START: Start of the working day (HH:MM, default 09:00)
        AUTOSCHEDULER_WORK_END: End of the working day (HH:MM, default 17:00)
        AUTOSCHEDULER_WORK_DAYS: Working weekdays, 0=Monday (default 0,1,2,3,4)
        AUTOSCHEDULER_BUFFER_MINUTES: Gap kept around placements (default 5)
        AUTOSCHEDULER_TIME_ZONE: IANA time zone (default unset)
        AUTOSCHEDULER_SEARCH_HORIZON_DAYS: Search window without a deadline (default 14)
        
    Raises:
        ConfigurationError: If any variable is malformed
    """
    work_start = _parse_time("AUTOSCHEDULER_WORK_START", os.getenv("AUTOSCHEDULER_WORK_START", DEFAULT_WORK_START))
    work_end = _parse_time("AUTOSCHEDULER_WORK_END", os.getenv("AUTOSCHEDULER_WORK_END", DEFAULT_WORK_END))
    work_days = _parse_days(
        "AUTOSCHEDULER_WORK_DAYS",
        os.getenv("AUTOSCHEDULER_WORK_DAYS", ",".join(str(day) for day in DEFAULT_WORK_DAYS)),
    )
    buffer_minutes = _parse_int(
        "AUTOSCHEDULER_BUFFER_MINUTES", os.getenv("AUTOSCHEDULER_BUFFER_MINUTES", str(DEFAULT_BUFFER_MINUTES))
    )
    horizon_days = _parse_int(
        "AUTOSCHEDULER_SEARCH_HORIZON_DAYS",
        os.getenv("AUTOSCHEDULER_SEARCH_HORIZON_DAYS", str(DEFAULT_SEARCH_HORIZON_DAYS)),
    )
    time_zone: Optional[str] = os.getenv("AUTOSCHEDULER_TIME_ZONE") or None
    
    try:
        hours = WorkingHours(start=work_start, end=work_end)
        settings = SchedulerSettings(
            working_hours={day: hours for day in work_days},
            buffer_minutes=buffer_minutes,
            time_zone=time_zone,
            search_horizon_days=horizon_days,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid scheduler settings: {e}") from e
    
    logger.debug(f"Loaded scheduler settings from environment: days={work_days} {work_start}-{work_end}")
    return settings
