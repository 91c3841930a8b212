"""Entry point for the Car Hire API.

Serves the FastAPI application with Uvicorn.  Host, port and log level
are read from the environment through ``Settings`` (``API_HOST``,
``API_PORT``, ``LOG_LEVEL``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from car_hire_api.app.core.config import settings
from car_hire_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by setup_logging.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
