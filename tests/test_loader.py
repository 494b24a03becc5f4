from pathlib import Path

import pytest
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import OperationDefinitionNode

from gqlform.document.loader import load_document, resolve_graphql_files
from tests.conftest import TestFormData


def test_resolve_graphql_files(tmp_path: Path) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / "a.graphql").write_text("enum A { X }")
    (nested / "b.graphql").write_text("enum B { Y }")
    (tmp_path / "notes.txt").write_text("not graphql")

    files = resolve_graphql_files([tmp_path, tmp_path / "a.graphql"])

    assert files == sorted([tmp_path / "a.graphql", nested / "b.graphql"])


def test_load_single_file() -> None:
    document = load_document(TestFormData.CREATE_USER)

    assert len(document.definitions) == 1
    assert isinstance(document.definitions[0], OperationDefinitionNode)


def test_load_directory_merges_definitions(tmp_path: Path) -> None:
    (tmp_path / "status.graphql").write_text("enum Status { ACTIVE }")
    (tmp_path / "role.graphql").write_text("enum Role { ADMIN }")

    document = load_document(tmp_path)

    assert len(document.definitions) == 2


def test_empty_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="No GraphQL source"):
        load_document(tmp_path)


def test_syntax_error_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.graphql"
    path.write_text("mutation {")

    with pytest.raises(GraphQLFileSyntaxError):
        load_document(path)
