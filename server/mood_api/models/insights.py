"""Per-dimension trend insight models."""
from pydantic import BaseModel
from typing import Literal

TrendDirection = Literal["improving", "declining", "steady"]


class DimensionInfo(BaseModel):
    """Display descriptor for a mood dimension."""

    id: str
    label: str
    emoji: str
    left: str
    right: str


class DimensionInsight(BaseModel):
    """Average and recent trend for one dimension across logged history."""

    dimension: str
    label: str
    emoji: str
    average: float
    trend: float
    direction: TrendDirection
