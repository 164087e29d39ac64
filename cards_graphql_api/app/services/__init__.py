"""
Service layer abstraction.

``card_store`` holds the in-memory cards, ``card_resolver`` binds
resolvers over a store to the GraphQL schema, and ``graphql_service``
parses, validates and executes documents against that schema.
"""
