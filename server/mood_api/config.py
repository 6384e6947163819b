"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Storage location
    data_path: str = os.getenv(
        "DATA_PATH",
        os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), "data"),
    )

    @property
    def db_path(self) -> str:
        return os.path.join(self.data_path, "db.json")

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 3001
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]

    # Derived views
    calendar_weeks: int = 12
    history_limit: int = 30

    class Config:
        env_prefix = "MOOD_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
