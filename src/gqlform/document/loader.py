from pathlib import Path

from ariadne import load_schema_from_path
from graphql import DocumentNode, parse

from gqlform import log


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Resolve a list of paths (files and directories) into a flat list of unique GraphQL files.

    Args:
        paths: List of file or directory paths

    Returns:
        Flat list of unique GraphQL file paths (deduplicated and sorted)
    """
    resolved_files: set[Path] = set()

    for path in paths:
        if path.is_file():
            resolved_files.add(path)
        elif path.is_dir():
            for file in path.rglob("*.graphql"):
                resolved_files.add(file)

    return sorted(resolved_files)


def load_document_str(paths: Path | list[Path]) -> str:
    """Concatenate the GraphQL sources found under the given files or folders."""
    if isinstance(paths, Path):
        paths = [paths]

    source = ""
    for graphql_file in resolve_graphql_files(paths):
        source += load_schema_from_path(graphql_file) + "\n"
    return source


def load_document(paths: Path | list[Path]) -> DocumentNode:
    """Load and parse a GraphQL document from files or folders.

    Raises:
        ValueError: If no GraphQL source was found under the given paths
        GraphQLSyntaxError: If the source does not parse
    """
    source = load_document_str(paths)
    if not source.strip():
        raise ValueError(f"No GraphQL source found in {paths}")

    document = parse(source)
    log.debug(f"Parsed document with {len(document.definitions)} definitions")
    return document
