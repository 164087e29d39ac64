"""
Parameters of a GraphQL-over-HTTP request.

The same three values can arrive in the URL of a GET request, in a
JSON, form or ``application/graphql`` POST body, or in a mix of body
and URL.  The endpoint collects them into a ``GraphQLParams`` instance
before handing the request to the execution service.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class GraphQLParams(BaseModel):
    query: Optional[str] = None
    variables: Optional[Dict[str, Any]] = None
    operation_name: Optional[str] = Field(None, alias="operationName")
    # Set when the client asked for JSON even from a browser.
    raw: bool = False

    model_config = {
        "populate_by_name": True,
    }
