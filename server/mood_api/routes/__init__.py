"""API route modules."""
from .moods import router as moods_router
from .tracker import router as tracker_router

__all__ = [
    "moods_router",
    "tracker_router",
]
