from dataclasses import dataclass

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
    OperationType,
    VariableDefinitionNode,
)

from gqlform import log
from gqlform.errors import (
    AmbiguousFragmentUsageError,
    MultipleOperationsError,
    NoMutationFoundError,
    NotExactlyOneQueryError,
)

ANONYMOUS_OPERATION_NAME = "data"


@dataclass(frozen=True)
class Operation:
    """The operation selected from a document, with its variable definitions in source order."""

    name: str
    variables: tuple[VariableDefinitionNode, ...]


def get_operations(document: DocumentNode, operation_type: OperationType) -> list[OperationDefinitionNode]:
    """Return the operation definitions of a document matching the given operation type."""
    return [
        definition
        for definition in document.definitions
        if isinstance(definition, OperationDefinitionNode) and definition.operation == operation_type
    ]


def get_fragments(document: DocumentNode) -> list[FragmentDefinitionNode]:
    return [definition for definition in document.definitions if isinstance(definition, FragmentDefinitionNode)]


def to_operation(definition: OperationDefinitionNode) -> Operation:
    """
    Extract the name and variables of an operation definition.

    Args:
        definition: The operation definition node

    Returns:
        Operation named after the definition, or "data" when it is anonymous
    """
    name = definition.name.value if definition.name else ANONYMOUS_OPERATION_NAME
    variables = tuple(definition.variable_definitions or ())
    return Operation(name=name, variables=variables)


def classify_mutation_operation(document: DocumentNode) -> Operation:
    """
    Select the single mutation of a document for building a form.

    Args:
        document: Parsed GraphQL document

    Returns:
        Operation: The mutation name and its variable definitions

    Raises:
        AmbiguousFragmentUsageError: If the document holds fragments but no operation
        MultipleOperationsError: If the document holds more than one operation
        NoMutationFoundError: If the document does not hold exactly one mutation
    """
    fragments = get_fragments(document)
    queries = get_operations(document, OperationType.QUERY)
    mutations = get_operations(document, OperationType.MUTATION)
    subscriptions = get_operations(document, OperationType.SUBSCRIPTION)

    operation_count = len(queries) + len(mutations) + len(subscriptions)

    if fragments and not operation_count:
        raise AmbiguousFragmentUsageError()

    if operation_count > 1:
        raise MultipleOperationsError(len(queries), len(mutations), len(subscriptions))

    if len(mutations) != 1:
        raise NoMutationFoundError(len(mutations))

    operation = to_operation(mutations[0])
    log.debug(f"Selected mutation '{operation.name}' with {len(operation.variables)} variables")
    return operation


def classify_query_operation(document: DocumentNode) -> Operation:
    """
    Select the single query of a document.

    Only the name matters to callers: it is the key of the fetched data
    payload that holds the initial form values.

    Raises:
        NotExactlyOneQueryError: If the document does not hold exactly one query
    """
    queries = get_operations(document, OperationType.QUERY)
    if len(queries) != 1:
        raise NotExactlyOneQueryError(len(queries))

    return to_operation(queries[0])
