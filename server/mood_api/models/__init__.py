"""Models for the mood tracker API."""
from .dimensions import Dimension, DIMENSIONS, DIMENSION_IDS, create_default_mood, get_dimension
from .mood import MoodEntry, MoodUpsert, MoodDeleted, MoodExport, DayView
from .insights import DimensionInfo, DimensionInsight, TrendDirection

__all__ = [
    "Dimension",
    "DIMENSIONS",
    "DIMENSION_IDS",
    "create_default_mood",
    "get_dimension",
    "MoodEntry",
    "MoodUpsert",
    "MoodDeleted",
    "MoodExport",
    "DayView",
    "DimensionInfo",
    "DimensionInsight",
    "TrendDirection",
]
