"""
Main entrypoint for the Bookstore Management API.

This module assembles the FastAPI application, sets up logging,
installs CORS and attaches the in-memory inventory.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app
here makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn bookstore_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from .core.config import settings
from .core.logging_config import setup_logging
from .core.storage import Inventory, init_storage
from .api.middleware import TrailingSlashMiddleware
from .api.v1.endpoints import info
from .api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log where the API listens and which routes it serves."""
    logger.info("Bookstore API running at http://%s:%s", settings.host, settings.port)
    for route in app.routes:
        if isinstance(route, APIRoute):
            for method in sorted(route.methods):
                logger.info("  %-6s %s", method, route.path)
    yield
    logger.info("Bookstore API shutting down")


def create_app(inventory: Optional[Inventory] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds an independent application with its own
    inventory, so tests can start from the seed data simply by
    creating a new app.

    Parameters
    ----------
    inventory : Optional[Inventory]
        Storage to serve.  A fresh, seeded ``Inventory`` is created
        when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log.  The logging configuration reads the desired log level
    # from settings.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(TrailingSlashMiddleware)

    init_storage(app, inventory)

    app.include_router(info.router, tags=["info"])
    app.include_router(v1_router, prefix=settings.api_prefix.rstrip("/"))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
