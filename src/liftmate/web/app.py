"""FastAPI application for the liftmate web API."""

import logging
from collections import deque
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..agents.client import GenerativeClient
from ..config import Settings, settings as default_settings
from ..context import AppContext
from ..db.engine import init_db
from ..db.repositories import ProfileRepository
from ..errors import (
    GenerationError,
    NoDraftError,
    ProfileRequiredError,
    RemoteStoreError,
)
from ..services import build_trainer
from .routers import api, dashboard, history, profile, workout

logger = logging.getLogger(__name__)

# Rest-over signals kept until a client polls; older ones are dropped
MAX_PENDING_NOTIFICATIONS = 20


def create_app(settings: Settings | None = None, ai: GenerativeClient | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize the database and the user's trainer on startup."""
        settings.DATA_DIR.mkdir(parents=True, exist_ok=True)
        await init_db(settings.db_path)

        context = AppContext.from_settings(settings)
        stored_profile = await ProfileRepository(settings.db_path).get(context.user_id)
        if stored_profile is not None:
            context.language = stored_profile.language

        notifications: deque[dict] = deque(maxlen=MAX_PENDING_NOTIFICATIONS)
        app.state.notifications = notifications
        app.state.trainer = build_trainer(
            context,
            notify=lambda title, body: notifications.append({"title": title, "body": body}),
            ai=ai,
        )
        logger.info("liftmate ready for user %s", context.user_id)
        yield
        app.state.trainer.session.timer.cancel()

    app = FastAPI(
        title="liftmate",
        description="AI personal trainer",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(profile.router)
    app.include_router(api.router)
    app.include_router(workout.router)
    app.include_router(history.router)
    app.include_router(dashboard.router)

    @app.exception_handler(GenerationError)
    async def generation_error(request: Request, exc: GenerationError):
        return JSONResponse(status_code=502, content={"error": str(exc)})

    @app.exception_handler(RemoteStoreError)
    async def store_error(request: Request, exc: RemoteStoreError):
        return JSONResponse(status_code=503, content={"error": str(exc)})

    @app.exception_handler(NoDraftError)
    async def no_draft(request: Request, exc: NoDraftError):
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(ProfileRequiredError)
    async def profile_required(request: Request, exc: ProfileRequiredError):
        return JSONResponse(
            status_code=409, content={"error": str(exc), "redirect": "/profile"}
        )

    @app.exception_handler(ValueError)
    async def invalid_value(request: Request, exc: ValueError):
        return JSONResponse(status_code=422, content={"error": str(exc)})

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
