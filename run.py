"""Entry point for the Bookstore Management API.

Launches the FastAPI application with Uvicorn.  Host, port and log
level come from ``bookstore_api.app.core.config.settings`` and can be
overridden with the ``HOST``, ``PORT`` and ``LOG_LEVEL`` environment
variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from bookstore_api.app.core.config import settings


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app="bookstore_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
