"""
GraphQL schema and resolvers for the cards API.

The schema is declared in SDL and built with graphql-core.  Resolvers
are not looked up on a root object at request time: ``build_card_schema``
attaches each resolver directly to its field when the schema is
constructed, and refuses to build a schema where a declared field has
no resolver or a resolver names a field that does not exist.

All resolvers are pure functions of the card store they close over and
of their arguments.  A failed lookup resolves to ``None`` (GraphQL
``null``), never to an error.
"""

from typing import Any, Callable, Dict, Optional, Tuple

from graphql import GraphQLObjectType, GraphQLResolveInfo, GraphQLSchema, build_schema

from cards_graphql_api.app.schemas.card import Card, CardLookupArgs
from cards_graphql_api.app.services.card_store import CardStore

CARD_SCHEMA_SDL = """
    type Query {
        name: String
        age: Int
        cards: [Card]
        card(category: String): Card
    }
    type Card {
        category: String
        isValid: Boolean
    }
"""

Resolver = Callable[..., Any]


class QueryResolver:
    """Resolvers for the top-level ``Query`` fields."""

    def __init__(self, store: CardStore) -> None:
        self._store = store

    def name(self, _source: Any, _info: GraphQLResolveInfo) -> str:
        return "Tom"

    def age(self, _source: Any, _info: GraphQLResolveInfo) -> int:
        return 6

    def cards(self, _source: Any, _info: GraphQLResolveInfo) -> Tuple[Card, ...]:
        return self._store.all()

    def card(self, _source: Any, _info: GraphQLResolveInfo, **kwargs: Any) -> Optional[Card]:
        # graphql-core omits the keyword entirely when the client does
        # not pass ``category``; an explicit null arrives as None.
        args = CardLookupArgs(**kwargs)
        return self._store.find_by_category(args.category)

    def field_resolvers(self) -> Dict[str, Resolver]:
        return {
            "name": self.name,
            "age": self.age,
            "cards": self.cards,
            "card": self.card,
        }


CARD_FIELD_RESOLVERS: Dict[str, Resolver] = {
    "category": lambda card, _info: card.category,
    "isValid": lambda card, _info: card.is_valid,
}


def _bind_resolvers(object_type: GraphQLObjectType, resolvers: Dict[str, Resolver]) -> None:
    """Attach ``resolvers`` to the fields of ``object_type``.

    Raises
    ------
    RuntimeError
        If the declared fields and the resolver names do not match
        one to one.
    """
    declared = set(object_type.fields)
    provided = set(resolvers)
    if declared != provided:
        raise RuntimeError(
            f"Resolvers for type {object_type.name} do not match its fields: "
            f"missing={sorted(declared - provided)} unknown={sorted(provided - declared)}"
        )
    for field_name, resolver in resolvers.items():
        object_type.fields[field_name].resolve = resolver


def build_card_schema(store: CardStore) -> GraphQLSchema:
    """Build the executable cards schema with resolvers over ``store``.

    Parameters
    ----------
    store : CardStore
        The cards served by the ``cards`` and ``card`` fields.

    Returns
    -------
    GraphQLSchema
        A schema ready to be passed to graphql-core's ``execute``.
        No root value is needed.
    """
    schema = build_schema(CARD_SCHEMA_SDL)
    query_type = schema.query_type
    card_type = schema.get_type("Card")
    if query_type is None or not isinstance(card_type, GraphQLObjectType):
        raise RuntimeError("Cards schema must declare the Query and Card object types")
    _bind_resolvers(query_type, QueryResolver(store).field_resolvers())
    _bind_resolvers(card_type, CARD_FIELD_RESOLVERS)
    return schema
