"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application, sets up logging and
error handling, serves the landing page and includes the API router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn exercise_tracker.app.main:app --reload

Each application owns one ``UserStore``.  It is created with the app,
exposed to handlers as ``app.state.store`` and cleared when the
application shuts down.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import settings
from .core.errors import ExerciseTrackerError
from .core.logging_config import setup_logging
from .core.store import UserStore

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
VIEWS_DIR = BASE_DIR / "views"
PUBLIC_DIR = BASE_DIR / "public"


async def handle_tracker_error(request: Request, exc: ExerciseTrackerError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Collapse FastAPI's 422 into the API's single client-error status.
    errors = exc.errors()
    message = errors[0].get("msg", "invalid request") if errors else "invalid request"
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store to serve requests from.  A fresh empty store is created
        when omitted; tests pass their own to inspect it directly.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield
        app.state.store.clear()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.store = store if store is not None else UserStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ExerciseTrackerError, handle_tracker_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        return FileResponse(VIEWS_DIR / "index.html")

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
