import pytest
from fastapi.testclient import TestClient

from cards_graphql_api.app.core.config import Settings
from cards_graphql_api.app.main import create_app
from cards_graphql_api.app.schemas.card import Card
from cards_graphql_api.app.services.card_resolver import build_card_schema
from cards_graphql_api.app.services.card_store import CardStore
from cards_graphql_api.app.services.graphql_service import GraphQLService


BANK_CARD = {"category": "Bank Card", "isValid": True}
SHOPPING_CARD = {"category": "Shopping Card", "isValid": False}


@pytest.fixture
def seeded_store():
    return CardStore.seeded()


@pytest.fixture
def duplicate_store():
    return CardStore(
        [
            Card(category="Gift Card", is_valid=False),
            Card(category="Loyalty Card", is_valid=True),
            Card(category="Gift Card", is_valid=True),
        ]
    )


@pytest.fixture
def schema(seeded_store):
    return build_card_schema(seeded_store)


@pytest.fixture
def service(schema):
    return GraphQLService(schema)


@pytest.fixture
def app_settings():
    return Settings(graphiql=True, graphql_path="/graphql", port=3001, log_file=None)


@pytest.fixture
def client(app_settings):
    return TestClient(create_app(app_settings))
