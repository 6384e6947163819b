"""Input validation for date keys and mood records."""
import math
import re
from datetime import date, datetime
from numbers import Integral, Real
from typing import Any

from .errors import InvalidInput
from .models.dimensions import DIMENSION_IDS, MIN_RATING, MAX_RATING

DATE_KEY_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
DATE_KEY_FORMAT = "%Y-%m-%d"


def is_date_key(value: Any) -> bool:
    """Return True if value is a YYYY-MM-DD string naming a real calendar date."""
    if not isinstance(value, str) or not DATE_KEY_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, DATE_KEY_FORMAT)
    except ValueError:
        return False
    return True


def validate_date_key(value: Any) -> str:
    if not is_date_key(value):
        raise InvalidInput(f"Invalid date format {value!r}. Use YYYY-MM-DD")
    return value


def parse_date_key(value: Any) -> date:
    return datetime.strptime(validate_date_key(value), DATE_KEY_FORMAT).date()


def to_date_key(day: date) -> str:
    return day.strftime(DATE_KEY_FORMAT)


def snap_rating(value: Any) -> int:
    """
    Round a slider position to the nearest whole rating (halves round up).

    Raises InvalidInput for non-numeric values, booleans, NaN, infinities
    and values too large to convert to float.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(f"Rating must be a number, got {value!r}")
    if isinstance(value, Integral):
        return int(value)
    try:
        if not math.isfinite(value):
            raise InvalidInput(f"Rating must be finite, got {value!r}")
        return int(math.floor(value + 0.5))
    except OverflowError as e:
        raise InvalidInput("Rating is out of range") from e


def is_complete_record(record: Any) -> bool:
    """Return True if record is a stored-form record: exactly the known
    dimensions, each an int in [MIN_RATING, MAX_RATING]."""
    if not isinstance(record, dict) or set(record) != set(DIMENSION_IDS):
        return False
    return all(
        isinstance(value, int) and not isinstance(value, bool) and MIN_RATING <= value <= MAX_RATING
        for value in record.values()
    )


def validate_record(record: Any) -> dict[str, int]:
    """
    Check that record holds a rating for every dimension and nothing else.

    Returns a new dict in dimension order with every value snapped to an
    integer in [MIN_RATING, MAX_RATING].
    """
    if not isinstance(record, dict):
        raise InvalidInput("Mood data must be an object keyed by dimension id")

    missing = [dim_id for dim_id in DIMENSION_IDS if dim_id not in record]
    if missing:
        raise InvalidInput(f"Missing dimensions: {', '.join(missing)}")

    unknown = sorted(str(key) for key in record if key not in DIMENSION_IDS)
    if unknown:
        raise InvalidInput(f"Unknown dimensions: {', '.join(unknown)}")

    cleaned = {}
    for dim_id in DIMENSION_IDS:
        rating = snap_rating(record[dim_id])
        if not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidInput(
                f"Rating for '{dim_id}' must be between {MIN_RATING} and {MAX_RATING}"
            )
        cleaned[dim_id] = rating
    return cleaned
