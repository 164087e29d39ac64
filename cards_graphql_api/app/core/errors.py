"""
Transport-level errors for the GraphQL endpoint.

Errors in the GraphQL document itself (syntax, validation, variable
coercion) are reported by the execution service.  The exception
defined here covers problems with the HTTP request that prevent a
document from being extracted at all, such as a missing ``query``
parameter or a JSON body that cannot be decoded.  It is rendered in
the same ``{"errors": [...]}`` shape so clients only need to handle
one error format.
"""

import logging
from typing import Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GraphQLRequestError(Exception):
    """An HTTP request that cannot be turned into a GraphQL operation."""

    def __init__(self, status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.headers = headers


async def graphql_request_error_handler(request: Request, exc: GraphQLRequestError) -> JSONResponse:
    """Render a ``GraphQLRequestError`` as a GraphQL error payload."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"errors": [{"message": exc.message}]},
        headers=exc.headers,
    )
