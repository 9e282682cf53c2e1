"""FastAPI web application for AutoScheduler.

A thin caller around the scheduling engine: the request carries the items,
the occupied calendar and optional settings, and the response is the
scheduling outcome. Nothing is stored between requests.
"""

import logging
from datetime import datetime
from typing import List, Optional
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from autoscheduler import __version__
from autoscheduler.config import settings_from_env
from autoscheduler.engine.scheduler import schedule_all
from autoscheduler.errors import ConfigurationError, InvalidInputError
from autoscheduler.models.interval import ExistingInterval
from autoscheduler.models.item import SchedulableItem
from autoscheduler.models.outcome import Placement, PlacementFailure, Suggestion
from autoscheduler.models.settings import SchedulerSettings

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="AutoScheduler API",
    description="Places flexible tasks into free working time around an existing calendar",
    version=__version__,
)


# Request/response models
class ScheduleRequest(BaseModel):
    """Request for a scheduling pass."""
    items: List[SchedulableItem] = Field(default_factory=list)
    existing_intervals: List[ExistingInterval] = Field(default_factory=list)
    settings: Optional[SchedulerSettings] = Field(None, description="Defaults to environment settings")
    now: Optional[datetime] = Field(None, description="Reference time (defaults to the current time)")


class ScheduleResponse(BaseModel):
    """Response for a scheduling pass."""
    success: bool
    summary: str
    now: datetime
    placements: List[Placement]
    unscheduled_item_ids: List[str]
    failures: List[PlacementFailure]
    suggestions: List[Suggestion]


@app.get("/health")
async def health():
    """Liveness check."""
    return {"status": "ok"}


@app.post("/schedule", response_model=ScheduleResponse)
async def build_schedule(request: ScheduleRequest):
    """Schedule the given items around the given occupied intervals."""
    try:
        settings = request.settings or settings_from_env()
        outcome = schedule_all(request.items, settings, request.existing_intervals, now=request.now)
    except (ConfigurationError, InvalidInputError) as e:
        logger.warning(f"Rejected schedule request: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=422, detail=str(e))
    
    return ScheduleResponse(
        success=outcome.success,
        summary=outcome.summary(),
        now=outcome.now,
        placements=outcome.placements,
        unscheduled_item_ids=outcome.unscheduled_item_ids,
        failures=outcome.failures,
        suggestions=outcome.suggestions,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
