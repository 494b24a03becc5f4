import json
import logging
import sys
from pathlib import Path
from typing import Any

import rich_click as click
import yaml
from ariadne.exceptions import GraphQLFileSyntaxError
from graphql import GraphQLError
from pydantic import ValidationError
from rich.traceback import install

from gqlform import __version__, log
from gqlform.config import load_resolver_config
from gqlform.document.loader import load_document, resolve_graphql_files
from gqlform.errors import FormBuildError
from gqlform.form.builder import build_form_spec
from gqlform.form.initial_values import extract_initial_values


class PathResolverOption(click.Option):
    def process_value(self, ctx: click.Context, value: Any) -> list[Path] | None:
        value = super().process_value(ctx, value)
        if not value:
            return None
        return resolve_graphql_files(list(set(value)))


mutation_option = click.option(
    "--mutation",
    "-m",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="GraphQL document holding the mutation the form is built from",
)


defs_option = click.option(
    "--defs",
    "-d",
    "defs",
    type=click.Path(exists=True, path_type=Path),
    cls=PathResolverOption,
    multiple=True,
    help="GraphQL file or directory with enum and input type definitions. Can be specified multiple times.",
)


resolvers_option = click.option(
    "--resolvers",
    "-r",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file mapping type names to widget overrides",
)


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


@click.group(context_settings={"auto_envvar_prefix": "gqlform"})
@click.option(
    "-l",
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="INFO",
    help="Log level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Log file",
)
@click.version_option(__version__)
def cli(log_level: str, log_file: Path | None) -> None:
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(logging.Formatter("%(asctime)s:%(levelname)s:%(message)s"))
        log.addHandler(file_handler)

    log.setLevel(log_level.upper())
    if log_level.upper() == "DEBUG":
        _ = install(show_locals=True)


@cli.command()
@mutation_option
@defs_option
@resolvers_option
@click.option(
    "--query",
    "-q",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="GraphQL document holding the query whose result seeds the form",
)
@click.option(
    "--data",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file with the 'data' payload of the query result",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    required=False,
    help="Output file",
)
def build(
    mutation: Path,
    defs: list[Path] | None,
    resolvers: Path | None,
    query: Path | None,
    data: Path | None,
    output: Path | None,
) -> None:
    """Build the form description of a GraphQL mutation."""
    if (query is None) != (data is None):
        raise click.UsageError("--query and --data must be given together")

    try:
        document = load_document(mutation)
        defs_document = load_document(defs) if defs else None
        resolver_config = load_resolver_config(resolvers)

        initial_values = None
        if query and data:
            initial_values = extract_initial_values(load_document(query), read_json(data))

        form_spec = build_form_spec(
            document,
            initial_values=initial_values,
            resolvers=resolver_config.resolvers if resolver_config else None,
            defs=defs_document,
        )
    except FormBuildError as e:
        log.error(f"Unsupported document: {e}")
        sys.exit(1)
    except (GraphQLError, GraphQLFileSyntaxError, ValidationError, yaml.YAMLError) as e:
        log.error(f"Invalid input: {e}")
        sys.exit(1)
    except OSError as e:
        log.error(f"File I/O error: {e}")
        sys.exit(1)
    except (TypeError, ValueError) as e:
        log.error(f"Invalid configuration: {e}")
        sys.exit(1)

    result = json.dumps(form_spec.to_dict(), indent=2, default=str)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        _ = output.write_text(result)
        log.success(f"Wrote form '{form_spec.name}' with {len(form_spec.fields)} fields to {output}")
    else:
        click.echo(result)


@cli.command()
@mutation_option
@defs_option
@resolvers_option
@click.option(
    "--values",
    "-v",
    "values_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="JSON file with the form values to check",
)
def validate(mutation: Path, defs: list[Path] | None, resolvers: Path | None, values_file: Path) -> None:
    """Check form values against the required fields of a GraphQL mutation."""
    try:
        resolver_config = load_resolver_config(resolvers)
        form_spec = build_form_spec(
            load_document(mutation),
            resolvers=resolver_config.resolvers if resolver_config else None,
            defs=load_document(defs) if defs else None,
        )
        values = read_json(values_file)
    except FormBuildError as e:
        log.error(f"Unsupported document: {e}")
        sys.exit(1)
    except (
        GraphQLError,
        GraphQLFileSyntaxError,
        ValidationError,
        yaml.YAMLError,
        TypeError,
        ValueError,
        OSError,
    ) as e:
        log.error(f"Invalid input: {e}")
        sys.exit(1)

    if not isinstance(values, dict):
        log.error(f"Values must be a JSON object, got {type(values).__name__}")
        sys.exit(1)

    errors = form_spec.validate(values)
    if errors:
        for field_name, message in errors.items():
            log.key_value(field_name, message, key_style="red")
        log.error(f"Found {len(errors)} invalid field(s) in form '{form_spec.name}'")
        sys.exit(1)

    log.success(f"All required fields of form '{form_spec.name}' are set")


if __name__ == "__main__":
    cli()
