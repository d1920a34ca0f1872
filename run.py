"""Entry point for the Exercise Tracker API.

Starts the FastAPI application under Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (or a ``.env`` file in
the working directory); defaults are ``0.0.0.0`` and ``3000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from exercise_tracker.app.core.config import settings
from exercise_tracker.app.main import app

logger = logging.getLogger("exercise_tracker")


async def main() -> None:
    """Serve the API until interrupted."""
    # Logging is already configured by create_app; keep uvicorn from replacing it.
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    logger.info("Your app is listening on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
