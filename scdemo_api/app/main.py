"""
Main entrypoint for the SC Demo API.

This module assembles the FastAPI application: it sets up logging,
installs the request logging middleware and the exception handlers,
and includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn scdemo_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.middleware import RequestLogMiddleware
from .core.exception_handlers import register_exception_handlers
from .core.redis_client import close_redis
from .core.db import init_db
from .services.sample_client import close_sample_client
from .api.router import router as api_router
from .api.endpoints import final


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.add_middleware(RequestLogMiddleware)
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(final.router, prefix="/final", tags=["final"])

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await close_redis()
        close_sample_client()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
