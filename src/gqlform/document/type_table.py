from graphql import DocumentNode, EnumTypeDefinitionNode, InputObjectTypeDefinitionNode

from gqlform import log

TypeDefinition = EnumTypeDefinitionNode | InputObjectTypeDefinitionNode
TypeDefinitionTable = dict[str, TypeDefinition]


def build_type_table(defs: DocumentNode | None) -> TypeDefinitionTable:
    """
    Index the enum and input object definitions of a document by type name.

    Args:
        defs: Document with auxiliary type definitions, or None

    Returns:
        TypeDefinitionTable: Mapping from type name to its definition node.
        Empty when no document is given. A later definition with the same
        name replaces an earlier one.
    """
    types: TypeDefinitionTable = {}
    if defs is None:
        return types

    for definition in defs.definitions:
        if not isinstance(definition, EnumTypeDefinitionNode | InputObjectTypeDefinitionNode):
            continue

        type_name = definition.name.value
        if type_name in types:
            log.debug(f"Type '{type_name}' is defined more than once, keeping the last definition")
        types[type_name] = definition

    return types
