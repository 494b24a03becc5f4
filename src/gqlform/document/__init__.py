from .classifier import Operation, classify_mutation_operation, classify_query_operation
from .loader import load_document, resolve_graphql_files
from .type_table import TypeDefinitionTable, build_type_table

__all__ = [
    "Operation",
    "TypeDefinitionTable",
    "build_type_table",
    "classify_mutation_operation",
    "classify_query_operation",
    "load_document",
    "resolve_graphql_files",
]
