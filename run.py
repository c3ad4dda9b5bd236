"""Entry point for the Sports Roster API server.

Builds the application with ``create_app`` and serves it with uvicorn.
Host and port come from ``API_HOST`` and ``API_PORT`` (see
``roster_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from roster_api.app.core.config import settings
from roster_api.app.main import create_app


async def run_api() -> None:
    """Start the API using uvicorn."""
    config = Config(
        app=create_app(),
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutting down")
