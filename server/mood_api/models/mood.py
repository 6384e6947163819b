"""Mood record API models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Optional


class MoodEntry(BaseModel):
    """One day's complete mood record."""

    date: str
    data: dict[str, int]


class MoodUpsert(BaseModel):
    """Request body for creating or replacing a day's record."""

    date: Optional[str] = None
    data: Optional[dict[str, Any]] = None


class MoodDeleted(BaseModel):
    message: str = "Mood deleted"
    date: str


class MoodExport(BaseModel):
    """Full store export."""

    model_config = ConfigDict(populate_by_name=True)

    export_date: str = Field(alias="exportDate")
    moods: dict[str, dict[str, int]]
    version: str


class DayView(BaseModel):
    """Computed calendar cell for a single date. Never persisted."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    data: Optional[dict[str, int]] = None
    average: Optional[float] = Field(default=None, serialization_alias="avg")
    is_today: bool = Field(default=False, serialization_alias="isToday")
    is_future: bool = Field(default=False, serialization_alias="isFuture")
