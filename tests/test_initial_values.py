import pytest
from graphql import parse

from gqlform import extract_initial_values
from gqlform.errors import NotExactlyOneQueryError


def test_values_are_read_from_query_key() -> None:
    document = parse("query user($id: ID!) { user(id: $id) { email } }")

    assert extract_initial_values(document, {"user": {"email": "ada@example.com"}}) == {"email": "ada@example.com"}


def test_anonymous_query_reads_data_key() -> None:
    document = parse("{ user { email } }")

    assert extract_initial_values(document, {"data": {"email": "x"}}) == {"email": "x"}


def test_missing_key_gives_none() -> None:
    document = parse("query user { user { email } }")

    assert extract_initial_values(document, {"other": {}}) is None


def test_mutation_document_is_rejected() -> None:
    with pytest.raises(NotExactlyOneQueryError):
        extract_initial_values(parse("mutation m($a: String) { m }"), {"m": {}})
