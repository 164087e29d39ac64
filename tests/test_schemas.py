import pytest
from pydantic import ValidationError

from cards_graphql_api.app.schemas.card import Card, CardLookupArgs
from cards_graphql_api.app.schemas.graphql import GraphQLParams


def test_card_config_is_frozen():
    assert Card.model_config["frozen"] is True
    card = Card(category="Bank Card", is_valid=True)
    with pytest.raises(ValidationError):
        card.is_valid = False
    assert hash(card) == hash(Card(category="Bank Card", is_valid=True))


def test_lookup_args_default_to_unset():
    assert CardLookupArgs().category is None
    assert CardLookupArgs(category="Bank Card").category == "Bank Card"


def test_graphql_params_accept_field_name_and_alias():
    assert GraphQLParams(operation_name="Find").operation_name == "Find"
    assert GraphQLParams.model_validate({"operationName": "Find"}).operation_name == "Find"

