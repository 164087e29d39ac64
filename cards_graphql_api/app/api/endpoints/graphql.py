"""
GraphQL endpoint.

A single route speaks GraphQL over HTTP.  ``GET`` requests carry the
document in the ``query`` URL parameter (with optional ``variables``
as JSON text and ``operationName``); ``POST`` requests carry it in a
JSON, ``application/graphql`` or form-encoded body.  Values missing
from a POST body are taken from the URL.

Browsers issuing a ``GET`` receive the GraphiQL explorer instead of a
JSON response when it is enabled in the settings, unless the ``raw``
URL parameter is present.  Other HTTP methods are answered with
``405``.
"""

import json
from typing import Any, Dict, Mapping
from urllib.parse import parse_qsl

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, Response

from cards_graphql_api.app.api.graphiql import render_graphiql
from cards_graphql_api.app.core.errors import GraphQLRequestError
from cards_graphql_api.app.schemas.graphql import GraphQLParams

router = APIRouter()

ALLOWED_METHODS = ("GET", "POST")


async def _read_body(request: Request) -> Dict[str, Any]:
    """Decode the POST body according to its content type.

    Unknown content types yield an empty dict so that URL parameters
    can still supply the query.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    raw = await request.body()
    if content_type == "application/graphql":
        return {"query": _decode_text(raw)}
    if content_type == "application/json":
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            raise GraphQLRequestError(status.HTTP_400_BAD_REQUEST, "POST body sent invalid JSON.")
        if not isinstance(data, dict):
            raise GraphQLRequestError(status.HTTP_400_BAD_REQUEST, "POST body sent invalid JSON.")
        return data
    if content_type == "application/x-www-form-urlencoded":
        return dict(parse_qsl(_decode_text(raw), keep_blank_values=True))
    return {}


def _decode_text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        raise GraphQLRequestError(status.HTTP_400_BAD_REQUEST, "POST body sent invalid UTF-8.")


def _parse_variables(value: Any) -> Any:
    if value is None or value == "":
        return None
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            raise GraphQLRequestError(status.HTTP_400_BAD_REQUEST, "Variables are invalid JSON.")
    if value is not None and not isinstance(value, dict):
        raise GraphQLRequestError(status.HTTP_400_BAD_REQUEST, "Variables are invalid JSON.")
    return value


async def read_graphql_params(request: Request) -> GraphQLParams:
    """Collect ``query``, ``variables`` and ``operationName`` from ``request``."""
    body: Dict[str, Any] = {}
    if request.method == "POST":
        body = await _read_body(request)
    url: Mapping[str, str] = request.query_params

    query = body.get("query") if body.get("query") is not None else url.get("query")
    if query is not None and not isinstance(query, str):
        query = None
    variables = body.get("variables") if body.get("variables") is not None else url.get("variables")
    operation_name = body.get("operationName") or url.get("operationName") or None
    if operation_name is not None and not isinstance(operation_name, str):
        operation_name = None

    return GraphQLParams(
        query=query or None,
        variables=_parse_variables(variables),
        operation_name=operation_name,
        raw="raw" in url or "raw" in body,
    )


def _prefers_html(accept: str) -> bool:
    """Return True if ``accept`` ranks HTML ahead of JSON."""
    for media_range in accept.split(","):
        media_type = media_range.split(";")[0].strip().lower()
        if media_type == "text/html":
            return True
        if media_type in ("application/json", "*/*"):
            return False
    return False


@router.api_route("", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], response_class=JSONResponse)
async def graphql_http(request: Request) -> Response:
    """Execute a GraphQL request or serve the GraphiQL explorer."""
    if request.method not in ALLOWED_METHODS:
        raise GraphQLRequestError(
            status.HTTP_405_METHOD_NOT_ALLOWED,
            "GraphQL only supports GET and POST requests.",
            headers={"Allow": ", ".join(ALLOWED_METHODS)},
        )

    params = await read_graphql_params(request)

    settings = request.app.state.settings
    if (
        settings.graphiql
        and request.method == "GET"
        and not params.raw
        and _prefers_html(request.headers.get("accept", ""))
    ):
        return HTMLResponse(render_graphiql(params))

    if not params.query:
        raise GraphQLRequestError(status.HTTP_400_BAD_REQUEST, "Must provide query string.")

    outcome = request.app.state.graphql_service.execute(params, http_method=request.method)
    return JSONResponse(status_code=outcome.status_code, content=outcome.payload, headers=outcome.headers)
