"""Mood record API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_mood_service
from ..models.mood import MoodDeleted, MoodEntry, MoodExport, MoodUpsert
from ..services.mood_service import MoodService

router = APIRouter(prefix="/api/moods", tags=["Moods"])

NOT_FOUND_MESSAGE = "Mood not found for this date"


@router.get("", response_model=dict[str, dict[str, int]])
async def list_moods(service: MoodService = Depends(get_mood_service)):
    """Get every stored mood record keyed by date."""
    return service.store.list_all()


# Registered before /{date} so "export" is never treated as a date
@router.get("/export/all", response_model=MoodExport)
async def export_moods(service: MoodService = Depends(get_mood_service)):
    """Export the whole store with export metadata."""
    return MoodExport(**service.export())


@router.get("/{date}", response_model=MoodEntry)
async def get_mood(date: str, service: MoodService = Depends(get_mood_service)):
    """Get the mood record for a specific date."""
    record = service.fetch_day(date)
    if record is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return MoodEntry(date=date, data=record)


@router.post("", response_model=MoodEntry)
async def upsert_mood(body: MoodUpsert, service: MoodService = Depends(get_mood_service)):
    """Create or fully replace the mood record for a date."""
    if not body.date or body.data is None:
        raise HTTPException(status_code=400, detail="Date and data are required")
    return service.save(body.date, body.data)


@router.delete("/{date}", response_model=MoodDeleted)
async def delete_mood(date: str, service: MoodService = Depends(get_mood_service)):
    """Delete the mood record for a date."""
    if not service.remove(date):
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return MoodDeleted(date=date)
