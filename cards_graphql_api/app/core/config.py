"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
reproduce the public contract of the service: the GraphQL endpoint is
served at ``/graphql`` on port 3001 with the GraphiQL explorer
enabled.  No variable needs to be set to run the server.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Cards GraphQL API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional log file.  Console logging is always enabled.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path of the single GraphQL endpoint.  Must start with a slash.
    graphql_path: str = os.getenv("GRAPHQL_PATH", "/graphql")

    # Serve the GraphiQL explorer to browsers hitting the endpoint with GET.
    graphiql: bool = _env_flag("GRAPHIQL", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
