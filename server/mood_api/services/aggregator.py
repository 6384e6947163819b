"""
Derived views over stored mood records.

Pure functions: nothing here reads or writes the store. Callers pass in the
records they already fetched.
"""
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..models.dimensions import DIMENSIONS
from ..models.insights import DimensionInsight, TrendDirection
from ..models.mood import DayView
from ..validation import to_date_key

DEFAULT_CALENDAR_WEEKS = 12
MIN_TREND_VALUES = 7
TREND_SAMPLE = 3
TREND_THRESHOLD = 0.3
MIN_INSIGHT_DAYS = 3


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def average_of(record: Optional[dict]) -> Optional[float]:
    """Mean of all dimension values in record, or None if there is no record."""
    if not record:
        return None
    return _mean(list(record.values()))


def _start_of_week(day: date) -> date:
    # weekday(): Monday=0 ... Sunday=6; weeks start on Sunday
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _end_of_week(day: date) -> date:
    return _start_of_week(day) + timedelta(days=6)


def calendar_grid(
    moods: dict[str, dict],
    window_end: date,
    weeks: int = DEFAULT_CALENDAR_WEEKS,
    today: Optional[date] = None,
) -> list[list[DayView]]:
    """
    Bucket stored records into Sunday-to-Saturday weeks.

    The window covers `weeks` weeks ending at window_end. The first cell is
    the Sunday on or before the window start and the last cell is the
    Saturday on or after window_end, so every week has exactly 7 days.
    Days after window_end are flagged future and never carry a record.
    """
    if weeks < 1:
        raise ValueError("weeks must be at least 1")
    if today is None:
        today = window_end

    start = _start_of_week(window_end - timedelta(weeks=weeks - 1))
    end = _end_of_week(window_end)

    grid: list[list[DayView]] = []
    week: list[DayView] = []
    day = start
    while day <= end:
        key = to_date_key(day)
        is_future = day > window_end
        data = None if is_future else moods.get(key)
        week.append(
            DayView(
                date=key,
                data=data,
                average=average_of(data),
                is_today=day == today,
                is_future=is_future,
            )
        )
        if len(week) == 7:
            grid.append(week)
            week = []
        day += timedelta(days=1)

    return grid


def trend(values: Sequence[float]) -> float:
    """
    Recent-versus-earlier delta of a most-recent-first sequence.

    Returns mean(first 3) - mean(last 3), so a positive result means recent
    values are higher than older ones. Fewer than 7 values gives 0.
    """
    if len(values) < MIN_TREND_VALUES:
        return 0.0
    return _mean(values[:TREND_SAMPLE]) - _mean(values[-TREND_SAMPLE:])


def trend_direction(delta: float) -> TrendDirection:
    if delta > TREND_THRESHOLD:
        return "improving"
    if delta < -TREND_THRESHOLD:
        return "declining"
    return "steady"


def dimension_insights(history: Iterable[tuple[str, dict]]) -> list[DimensionInsight]:
    """
    Per-dimension average and trend over most-recent-first (date, record) entries.

    Returns an empty list until at least MIN_INSIGHT_DAYS days are logged.
    """
    records = [record for _, record in history]
    if len(records) < MIN_INSIGHT_DAYS:
        return []

    insights = []
    for dim in DIMENSIONS:
        values = [record[dim.id] for record in records if dim.id in record]
        if not values:
            continue
        delta = trend(values)
        insights.append(
            DimensionInsight(
                dimension=dim.id,
                label=dim.label,
                emoji=dim.emoji,
                average=_mean(values),
                trend=delta,
                direction=trend_direction(delta),
            )
        )
    return insights
