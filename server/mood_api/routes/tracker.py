"""Daily tracking API routes: today's record, history, calendar and insights."""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from ..config import Settings
from ..dependencies import get_app_settings, get_mood_service
from ..models.dimensions import DIMENSIONS
from ..models.insights import DimensionInfo, DimensionInsight
from ..models.mood import DayView, MoodEntry
from ..services.mood_service import MoodService

router = APIRouter(prefix="/api", tags=["Tracker"])


@router.get("/dimensions", response_model=list[DimensionInfo])
async def get_dimensions():
    """Get the tracked mood dimensions in display order."""
    return [DimensionInfo(**dim.to_dict()) for dim in DIMENSIONS]


@router.get("/today", response_model=MoodEntry)
async def get_today(service: MoodService = Depends(get_mood_service)):
    """Get today's mood, or a neutral record if nothing is logged yet."""
    return MoodEntry(date=service.today_key(), data=service.fetch_today())


@router.put("/today", response_model=MoodEntry)
async def submit_today(
    record: dict[str, Any] = Body(..., description="Rating for every dimension"),
    service: MoodService = Depends(get_mood_service),
):
    """Replace today's mood with a complete record."""
    return service.submit(record)


@router.get("/history", response_model=list[MoodEntry])
async def get_history(
    limit: Optional[int] = Query(default=None, ge=1, description="Maximum entries to return"),
    service: MoodService = Depends(get_mood_service),
    settings: Settings = Depends(get_app_settings),
):
    """Get logged days, most recent first."""
    return service.fetch_history(limit or settings.history_limit)


@router.get("/calendar", response_model=list[list[DayView]])
async def get_calendar(
    weeks: Optional[int] = Query(default=None, ge=1, le=104, description="Number of weeks in the window"),
    end: Optional[str] = Query(default=None, description="Window end date (YYYY-MM-DD), defaults to today"),
    service: MoodService = Depends(get_mood_service),
    settings: Settings = Depends(get_app_settings),
):
    """Get the rolling calendar grid, one list of 7 days per week."""
    return service.calendar(weeks=weeks or settings.calendar_weeks, end=end)


@router.get("/insights", response_model=list[DimensionInsight])
async def get_insights(service: MoodService = Depends(get_mood_service)):
    """Get per-dimension averages and recent trends."""
    return service.insights()
