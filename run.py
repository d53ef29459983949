"""Entry point for the Bookshelf API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``localhost`` and ``9000``); see
``bookshelf_api/app/core/config.py`` for the other settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from bookshelf_api.app.core.config import settings
from bookshelf_api.app.core.logging_config import uvicorn_level
from bookshelf_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=uvicorn_level(settings.log_level),
        # Handlers come from setup_logging; keep uvicorn from replacing them.
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running on http://%s:%s", settings.host, settings.port)
    await server.serve()


async def main() -> None:
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
