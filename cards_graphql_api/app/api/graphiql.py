"""
GraphiQL explorer page.

The page is a single HTML document that loads React and GraphiQL from
a CDN and sends queries back to the path it was served from.  Any
``query``, ``variables`` and ``operationName`` present in the URL are
used to pre-fill the editors.
"""

import json
from string import Template
from typing import Any, Optional

from cards_graphql_api.app.schemas.graphql import GraphQLParams

GRAPHIQL_VERSION = "3"
REACT_VERSION = "18"

_GRAPHIQL_TEMPLATE = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>GraphiQL</title>
  <style>
    body { margin: 0; height: 100vh; overflow: hidden; }
    #graphiql { height: 100vh; }
  </style>
  <link rel="stylesheet" href="https://unpkg.com/graphiql@${graphiql_version}/graphiql.min.css" />
</head>
<body>
  <div id="graphiql">Loading...</div>
  <script crossorigin src="https://unpkg.com/react@${react_version}/umd/react.production.min.js"></script>
  <script crossorigin src="https://unpkg.com/react-dom@${react_version}/umd/react-dom.production.min.js"></script>
  <script crossorigin src="https://unpkg.com/graphiql@${graphiql_version}/graphiql.min.js"></script>
  <script>
    var fetcher = GraphiQL.createFetcher({ url: window.location.pathname });
    var root = ReactDOM.createRoot(document.getElementById('graphiql'));
    root.render(
      React.createElement(GraphiQL, {
        fetcher: fetcher,
        defaultEditorToolbarOpen: true,
        query: ${query},
        variables: ${variables},
        operationName: ${operation_name},
      })
    );
  </script>
</body>
</html>
"""
)


def _js_literal(value: Optional[Any]) -> str:
    """Encode ``value`` as a JavaScript literal safe to inline in a script tag."""
    if value is None:
        return "undefined"
    return json.dumps(value).replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def render_graphiql(params: GraphQLParams) -> str:
    """Return the GraphiQL HTML page pre-filled from ``params``."""
    variables = json.dumps(params.variables, indent=2) if params.variables is not None else None
    return _GRAPHIQL_TEMPLATE.substitute(
        graphiql_version=GRAPHIQL_VERSION,
        react_version=REACT_VERSION,
        query=_js_literal(params.query),
        variables=_js_literal(variables),
        operation_name=_js_literal(params.operation_name),
    )
