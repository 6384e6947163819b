"""Mood tracker service: the in-process API the HTTP routes call.

Every operation validates its input before the store is touched. Storage
failures propagate to the caller as StorageFailure; nothing is retried and
nothing is masked as empty data.
"""
import logging
from datetime import date
from typing import Callable, Optional

from ..errors import InvalidInput
from ..models.dimensions import create_default_mood
from ..models.insights import DimensionInsight
from ..models.mood import DayView, MoodEntry
from ..store import MoodStore
from ..validation import parse_date_key, to_date_key, validate_date_key, validate_record
from .aggregator import DEFAULT_CALENDAR_WEEKS, calendar_grid, dimension_insights

logger = logging.getLogger(__name__)


class MoodService:
    """
    Facade over an injected MoodStore.

    Args:
        store: Backing record store.
        today: Callable returning the current local date. Defaults to date.today.
    """

    def __init__(self, store: MoodStore, today: Optional[Callable[[], date]] = None):
        self.store = store
        self._today = today or date.today

    def today_key(self) -> str:
        return to_date_key(self._today())

    def fetch_today(self) -> dict[str, int]:
        """Today's record, or a neutral record if nothing is logged yet."""
        record = self.store.get(self.today_key())
        return record if record is not None else create_default_mood()

    def fetch_day(self, date_key: str) -> Optional[dict[str, int]]:
        return self.store.get(validate_date_key(date_key))

    def fetch_history(self, limit: Optional[int] = None) -> list[MoodEntry]:
        """All logged days, most recent first, optionally truncated to limit."""
        if limit is not None and limit < 1:
            raise InvalidInput("limit must be at least 1")
        moods = self.store.list_all()
        entries = [MoodEntry(date=key, data=moods[key]) for key in sorted(moods, reverse=True)]
        return entries[:limit] if limit is not None else entries

    def save(self, date_key: str, record: dict) -> MoodEntry:
        """
        Replace the record for date_key and return what the store now holds.

        The write is followed by one confirmatory read, so the returned entry
        reflects persisted state rather than the request body.
        """
        validate_date_key(date_key)
        cleaned = validate_record(record)
        self.store.put(date_key, cleaned)
        stored = self.store.get(date_key)
        logger.info(f"[MOOD SERVICE] Saved mood for {date_key}")
        return MoodEntry(date=date_key, data=stored)

    def submit(self, record: dict) -> MoodEntry:
        """Save record as today's mood."""
        return self.save(self.today_key(), record)

    def remove(self, date_key: str) -> bool:
        """Delete the record for date_key. Returns False if none existed."""
        removed = self.store.delete(validate_date_key(date_key))
        if removed:
            logger.info(f"[MOOD SERVICE] Removed mood for {date_key}")
        return removed

    def calendar(self, weeks: int = DEFAULT_CALENDAR_WEEKS, end: Optional[str] = None) -> list[list[DayView]]:
        if weeks < 1:
            raise InvalidInput("weeks must be at least 1")
        today = self._today()
        window_end = parse_date_key(end) if end else today
        return calendar_grid(self.store.list_all(), window_end, weeks, today=today)

    def insights(self) -> list[DimensionInsight]:
        return dimension_insights((entry.date, entry.data) for entry in self.fetch_history())

    def export(self) -> dict:
        return self.store.export()
