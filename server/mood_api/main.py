"""Mood Tracker API - FastAPI application entry point."""
import logging
from datetime import date
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .errors import InvalidInput, StorageFailure
from .routes import moods, tracker
from .services.mood_service import MoodService
from .store import JsonFileMoodStore, MoodStore

logger = logging.getLogger(__name__)


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
APP_LOGGER = "server.mood_api"


def configure_logging(settings: Settings) -> None:
    """Apply settings.log_level to the mood_api loggers in whichever process serves the app."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logging.getLogger(APP_LOGGER).setLevel(settings.log_level)


async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def _invalid_input(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def _request_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


async def _storage_failure(request: Request, exc: StorageFailure):
    logger.error(f"[MOOD API] Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"error": str(exc)})


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[MoodStore] = None,
    today: Optional[Callable[[], date]] = None,
) -> FastAPI:
    """
    Build the API around an explicit store.

    Args:
        settings: Application settings. Defaults to the environment-loaded settings.
        store: Record store to serve. Defaults to the JSON file at settings.db_path.
        today: Clock for "today". Defaults to the local date.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    store = store if store is not None else JsonFileMoodStore(settings.db_path)

    app = FastAPI(
        title="Mood Tracker API",
        description="Daily multi-dimensional mood log with calendar and trend views",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.mood_service = MoodService(store, today=today)

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(InvalidInput, _invalid_input)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(StorageFailure, _storage_failure)

    # Include routers
    app.include_router(moods.router)
    app.include_router(tracker.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint for the API."""
        return {"status": "healthy", "service": "mood-api"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "server.mood_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
        reload=True,
    )
