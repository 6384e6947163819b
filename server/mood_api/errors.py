"""Typed failures surfaced by the mood store and service layer."""


class MoodTrackerError(Exception):
    """Base class for mood tracker errors."""


class InvalidInput(MoodTrackerError):
    """Malformed date key or mood record. Raised before the store is touched."""


class StorageFailure(MoodTrackerError):
    """The backing document could not be read or written."""
