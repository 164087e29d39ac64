"""
Application package initializer.

The application is organised into ``core`` (settings, logging, error
handling), ``schemas`` (pydantic models), ``services`` (card store,
GraphQL schema and execution) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
