"""
Pydantic schema definitions.

``card`` holds the card record and the arguments of the ``card``
lookup; ``graphql`` holds the parameters of a GraphQL-over-HTTP
request.
"""
