"""
Main entrypoint for the Cards GraphQL API.

This module assembles the FastAPI application: it sets up logging,
builds the card store and the executable GraphQL schema, and mounts
the GraphQL endpoint.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with ``python run.py`` or any ASGI server, e.g.::

    uvicorn cards_graphql_api.app.main:app --port 3001
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.router import build_router
from .core.config import Settings, settings
from .core.errors import GraphQLRequestError, graphql_request_error_handler
from .core.logging_config import CONSOLE_LOGGER, setup_logging
from .core.middleware import RequestLoggingMiddleware
from .services.card_resolver import build_card_schema
from .services.card_store import CardStore
from .services.graphql_service import GraphQLService

logger = logging.getLogger(__name__)
console = logging.getLogger(CONSOLE_LOGGER)


def create_app(app_settings: Optional[Settings] = None, store: Optional[CardStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
    store : Optional[CardStore]
        Cards to serve.  Defaults to the seed cards.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the steps below
    # can safely log messages.
    setup_logging(app_settings.log_level, app_settings.log_file)

    store = store if store is not None else CardStore.seeded()
    schema = build_card_schema(store)
    logger.debug("Built GraphQL schema over %d cards", len(store))

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        console.info("server started on %s", app_settings.port)
        yield
        logger.info("server stopped")

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version, lifespan=lifespan)
    app.state.settings = app_settings
    app.state.graphql_service = GraphQLService(schema)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(GraphQLRequestError, graphql_request_error_handler)
    app.include_router(build_router(app_settings.graphql_path))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
