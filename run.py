"""Entry point for the Cards GraphQL API server.

This script serves the FastAPI application with Uvicorn on the host
and port from the application settings (``0.0.0.0:3001`` unless
``HOST`` or ``PORT`` are set).  Once listening, the console shows
``server started on 3001``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from cards_graphql_api.app.core.config import settings
from cards_graphql_api.app.main import app


async def serve() -> None:
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


def main() -> None:
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
