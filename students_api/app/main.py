"""
Main entrypoint for the Students API.

This module assembles the FastAPI application: it sets up logging,
registers the error handlers and routers, and on startup opens the
student store and applies database migrations.  ``create_app`` builds
and configures the app, which is then instantiated at module import
time as ``app`` so it can be served directly, e.g.::

    uvicorn students_api.app.main:app --reload

The import itself does not touch the database; that happens when the
application starts.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path, init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.student_service import StudentService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db_path = get_database_path(settings)
        init_db(db_path)
        app.state.student_service = StudentService(db_path)
        logger.info(
            "Storage initialised at %s (env=%s, version=%s)",
            db_path,
            settings.env,
            settings.api_version,
        )
        yield
        logger.info("Server shut down")

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
