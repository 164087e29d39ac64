from cards_graphql_api.app.schemas.graphql import GraphQLParams

from .conftest import BANK_CARD


def test_successful_query(service):
    outcome = service.execute(GraphQLParams(query="{ name age }"))
    assert outcome.status_code == 200
    assert outcome.payload == {"data": {"name": "Tom", "age": 6}}
    assert outcome.headers is None


def test_lookup_miss_is_data_not_error(service):
    outcome = service.execute(GraphQLParams(query='{ name card(category: "Nonexistent") { category } }'))
    assert outcome.status_code == 200
    assert outcome.payload == {"data": {"name": "Tom", "card": None}}


def test_variables_and_operation_name(service):
    params = GraphQLParams(
        query=(
            "query Names { name }\n"
            "query Lookup($category: String) { card(category: $category) { category isValid } }"
        ),
        variables={"category": "Bank Card"},
        operation_name="Lookup",
    )
    outcome = service.execute(params)
    assert outcome.status_code == 200
    assert outcome.payload == {"data": {"card": BANK_CARD}}


def test_syntax_error(service):
    outcome = service.execute(GraphQLParams(query="{ name "))
    assert outcome.status_code == 400
    assert "data" not in outcome.payload
    assert outcome.payload["errors"][0]["message"].startswith("Syntax Error")


def test_unknown_field_fails_validation(service):
    outcome = service.execute(GraphQLParams(query="{ name balance }"))
    assert outcome.status_code == 400
    assert "data" not in outcome.payload
    assert "balance" in outcome.payload["errors"][0]["message"]


def test_wrong_argument_type_fails_validation(service):
    outcome = service.execute(GraphQLParams(query="{ card(category: 5) { category } }"))
    assert outcome.status_code == 400
    assert "data" not in outcome.payload


def test_bad_variable_type_produces_no_data(service):
    params = GraphQLParams(
        query="query ($category: String) { card(category: $category) { category } }",
        variables={"category": {"nested": True}},
    )
    outcome = service.execute(params)
    assert outcome.status_code == 400
    assert "data" not in outcome.payload
    assert outcome.payload["errors"]


def test_mutation_over_get_is_not_allowed(service):
    outcome = service.execute(GraphQLParams(query="mutation { name }"), http_method="GET")
    assert outcome.status_code == 405
    assert outcome.headers == {"Allow": "POST"}


def test_validation_runs_before_get_method_check(service):
    params = GraphQLParams(
        query="mutation Change { name }\nquery Lookup { balance }",
        operation_name="Change",
    )
    outcome = service.execute(params, http_method="GET")
    assert outcome.status_code == 400
    assert outcome.headers is None
    assert "balance" in outcome.payload["errors"][0]["message"]


def test_mutation_over_post_is_rejected(service):
    outcome = service.execute(GraphQLParams(query="mutation { name }"), http_method="POST")
    assert outcome.status_code == 400
    assert "data" not in outcome.payload


def test_bad_request_does_not_affect_next_one(service):
    assert service.execute(GraphQLParams(query="{ balance }")).status_code == 400
    assert service.execute(GraphQLParams(query="{ age }")).payload == {"data": {"age": 6}}
