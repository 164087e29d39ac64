"""
Top-level API router.

The GraphQL endpoint router declares its route relative to the
configured endpoint path, so the path is supplied here as the prefix.
"""

from fastapi import APIRouter

from .endpoints import graphql


def build_router(graphql_path: str) -> APIRouter:
    """Return a router exposing the GraphQL endpoint at ``graphql_path``."""
    router = APIRouter()
    router.include_router(graphql.router, prefix=graphql_path.rstrip("/"), tags=["graphql"])
    return router
