"""Entry point for the Employee Management API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port, log level and database location are read from environment
variables (``API_HOST``, ``API_PORT``, ``LOG_LEVEL``, ``DATABASE_URL``);
see ``employee_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from employee_api.app.core.config import settings
from employee_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
