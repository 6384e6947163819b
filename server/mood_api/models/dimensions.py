"""Mood dimensions tracked each day and the neutral default record."""
from dataclasses import dataclass, asdict
from typing import Optional

MIN_RATING = -2
MAX_RATING = 2


@dataclass(frozen=True)
class Dimension:
    """One tracked facet of mood, rated on the fixed [-2, 2] scale."""

    id: str
    label: str
    emoji: str
    left: str  # label at the -2 end of the scale
    right: str  # label at the +2 end of the scale

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)


# Display order matters: "overall" is always shown first.
DIMENSIONS: tuple[Dimension, ...] = (
    Dimension("overall", "Overall", "\U0001F60A", "Low", "Great"),
    Dimension("home", "Home", "\U0001F3E0", "Conflict", "Harmony"),
    Dimension("work", "Work", "\U0001F4BC", "Stressed", "Flow"),
    Dimension("health", "Health", "\U0001F34E", "Sluggish", "Energized"),
    Dimension("sleep", "Sleep", "\U0001F4A4", "Restless", "Restorative"),
    Dimension("social", "Social", "\U0001F465", "Isolated", "Connected"),
)

DIMENSION_IDS: tuple[str, ...] = tuple(dim.id for dim in DIMENSIONS)


def get_dimension(dimension_id: str) -> Optional[Dimension]:
    for dim in DIMENSIONS:
        if dim.id == dimension_id:
            return dim
    return None


def create_default_mood() -> dict[str, int]:
    """Return a fresh neutral record with every dimension set to 0."""
    return {dim_id: 0 for dim_id in DIMENSION_IDS}
