from graphql import EnumTypeDefinitionNode, InputObjectTypeDefinitionNode, parse

from gqlform.document.type_table import build_type_table


def test_no_document_gives_empty_table() -> None:
    assert build_type_table(None) == {}


def test_only_enum_and_input_types_are_indexed() -> None:
    defs = parse(
        """
        enum Status { ACTIVE DELETED }
        input Address { street: String }
        type User { id: ID }
        scalar Date
        interface Node { id: ID }
        union Result = User
        query user { user { id } }
        fragment UserParts on User { id }
        """
    )

    types = build_type_table(defs)

    assert set(types) == {"Status", "Address"}
    assert isinstance(types["Status"], EnumTypeDefinitionNode)
    assert isinstance(types["Address"], InputObjectTypeDefinitionNode)


def test_enum_extensions_are_not_indexed() -> None:
    types = build_type_table(parse("extend enum Status { ARCHIVED }"))

    assert types == {}


def test_last_duplicate_definition_wins() -> None:
    defs = parse(
        """
        enum Status { ACTIVE }
        input Status { value: String }
        """
    )

    types = build_type_table(defs)

    assert isinstance(types["Status"], InputObjectTypeDefinitionNode)
