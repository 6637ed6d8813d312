"""Entry point for the Users API server.

Starts uvicorn on the host and port taken from the environment
(``HOST``, default ``0.0.0.0``; ``PORT``, default ``4000``).  The
backing file location is read from ``DATA_FILE`` (default
``users.json`` in the working directory).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.main import app

logger = logging.getLogger(__name__)


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logger.info("Server is running on http://localhost:%d", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
