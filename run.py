"""Entry point for the Students API.

This script serves the FastAPI application with uvicorn.  Host, port,
storage location and the shutdown grace period are read from the
environment (see ``students_api.app.core.config``).

On SIGINT/SIGTERM uvicorn stops accepting connections and gives
in-flight requests ``SHUTDOWN_GRACE_SECONDS`` (default 5) to finish.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from students_api.app.core.config import settings
from students_api.app.main import create_app

logger = logging.getLogger("students_api")


def build_server() -> Server:
    """Build a uvicorn server for the configured application."""
    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
    )
    return Server(config)


async def serve() -> None:
    server = build_server()
    logger.info("Server started at %s", settings.address)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
