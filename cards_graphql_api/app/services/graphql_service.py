"""
Execution of GraphQL requests.

``GraphQLService`` takes the parameters of one GraphQL-over-HTTP
request and runs them through graphql-core in three steps: parse,
validate, execute.  Keeping the steps separate lets the service map
each failure to the HTTP status clients expect:

* a document that does not parse or does not validate is answered
  with ``400`` and an ``errors`` list, and no ``data`` key;
* a mutation or subscription sent with GET is answered with ``405``;
* variables that cannot be coerced to their declared types produce no
  data and are answered with ``400``;
* anything that executes is answered with ``200`` and ``data``, plus
  ``errors`` if some field raised.

Nothing here keeps state between calls, so one bad request has no
effect on the next.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from graphql import (
    GraphQLError,
    GraphQLSchema,
    OperationType,
    execute_sync,
    get_operation_ast,
    parse,
    validate,
)

from cards_graphql_api.app.schemas.graphql import GraphQLParams

logger = logging.getLogger(__name__)


@dataclass
class ExecutionOutcome:
    """HTTP status, JSON payload and extra headers for one request."""

    status_code: int
    payload: Dict[str, Any]
    headers: Optional[Dict[str, str]] = None


def _error_payload(errors: List[GraphQLError]) -> Dict[str, Any]:
    return {"errors": [error.formatted for error in errors]}


class GraphQLService:
    """Run GraphQL documents against a fixed schema."""

    def __init__(self, schema: GraphQLSchema) -> None:
        self.schema = schema

    def execute(self, params: GraphQLParams, http_method: str = "POST") -> ExecutionOutcome:
        """Parse, validate and execute the document in ``params``.

        ``params.query`` must be set; the HTTP layer rejects requests
        without one before calling this method.
        """
        try:
            document = parse(params.query or "")
        except GraphQLError as error:
            logger.warning("GraphQL syntax error: %s", error.message)
            return ExecutionOutcome(400, _error_payload([error]))

        validation_errors = validate(self.schema, document)
        if validation_errors:
            logger.warning(
                "GraphQL validation failed: %s",
                "; ".join(error.message for error in validation_errors),
            )
            return ExecutionOutcome(400, _error_payload(validation_errors))

        # Only checked once the document is known to be valid.
        if http_method == "GET":
            operation = get_operation_ast(document, params.operation_name)
            if operation is not None and operation.operation != OperationType.QUERY:
                message = f"Can only perform a {operation.operation.value} operation from a POST request."
                logger.warning(message)
                return ExecutionOutcome(405, {"errors": [{"message": message}]}, {"Allow": "POST"})

        result = execute_sync(
            self.schema,
            document,
            variable_values=params.variables,
            operation_name=params.operation_name,
        )
        if result.errors:
            for error in result.errors:
                logger.error("GraphQL execution error: %s", error.message, exc_info=error.original_error)
            if result.data is None:
                return ExecutionOutcome(400, _error_payload(result.errors))
        return ExecutionOutcome(200, result.formatted)
