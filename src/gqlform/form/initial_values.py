from collections.abc import Mapping
from typing import Any

from graphql import DocumentNode

from gqlform import log
from gqlform.document.classifier import classify_query_operation


def extract_initial_values(query_document: DocumentNode, data: Mapping[str, Any]) -> Any:
    """
    Pick the initial form values out of a fetched query result.

    The values live under the key named after the query, or "data" when the
    query is anonymous.

    Args:
        query_document: Document holding exactly one query
        data: The "data" payload of the query result

    Returns:
        The value under the query key, or None when the payload lacks it

    Raises:
        NotExactlyOneQueryError: If the document does not hold exactly one query
    """
    name = classify_query_operation(query_document).name
    if name not in data:
        log.warning(f"Query result has no '{name}' entry, the form starts empty")
        return None
    return data[name]
