"""FastAPI dependencies."""
from fastapi import Request

from .config import Settings
from .services.mood_service import MoodService


def get_mood_service(request: Request) -> MoodService:
    """The MoodService built by create_app for this application."""
    return request.app.state.mood_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
