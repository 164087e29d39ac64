"""
API package containing the HTTP routes.

``router`` aggregates the endpoint routers defined in ``endpoints``;
``graphiql`` renders the interactive explorer page.
"""
