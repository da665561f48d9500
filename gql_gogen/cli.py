"""Command-line interface for gql-gogen."""

import logging
from pathlib import Path

import click
import httpx
from pydantic import ValidationError

from .core.auth import BearerAuth, HeaderAuth, NoAuth
from .core.config import GolangConfig
from .core.errors import GenerationError, SchemaLoadError
from .core.generator import GolangGenerator
from .core.loader import load_documents, load_schema


@click.group()
@click.version_option()
def main():
    """GraphQL code generator for Go.

    Generate typed Go structs and client methods from GraphQL schemas and
    operations.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    help="Schema file, directory, introspection .json file or endpoint URL.",
)
@click.option(
    "--documents",
    "-d",
    multiple=True,
    help="Operation document file, directory or glob pattern. Repeatable.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output Go file.",
)
@click.option(
    "--package",
    "-p",
    "package_name",
    default=None,
    help="Go package name (default: graphql).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON configuration file.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with Jinja2 templates overriding the built-in ones.",
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    help="'Name: value' header sent when fetching the schema from a URL.",
)
@click.option(
    "--bearer-token",
    envvar="GQL_GOGEN_TOKEN",
    help="Bearer token sent when fetching the schema from a URL.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    documents: tuple[str, ...],
    output: str,
    package_name: str | None,
    config_path: str | None,
    template_dir: str | None,
    headers: tuple[str, ...],
    bearer_token: str | None,
    verbose: bool,
):
    """Generate Go code from a GraphQL schema and operations.

    Examples:

        gql-gogen generate -s ./schema.graphql -d './queries/**/*.graphql' -o ./api/client.go

        gql-gogen generate -s https://api.example.com/graphql --bearer-token $TOKEN -o client.go -p api
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    output_path = Path(output).resolve()

    try:
        config = GolangConfig.from_file(config_path) if config_path else GolangConfig()
    except ValidationError as e:
        raise click.ClickException(f"Invalid config {config_path}:\n{e}")
    if package_name:
        config.package_name = package_name
    if template_dir:
        config.template_dir = template_dir

    try:
        auth = HeaderAuth.from_strings(list(headers)) if headers else NoAuth()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--header")
    if bearer_token:
        auth = HeaderAuth({**auth.get_headers(), **BearerAuth(bearer_token).get_headers()})

    if verbose:
        click.echo(f"Schema: {schema}")
        click.echo(f"Output: {output_path}")
        click.echo(f"Package: {config.package_name}")

    try:
        click.echo("Loading schema...")
        graphql_schema = load_schema(schema, auth=auth)
        click.echo("Loading documents...")
        parsed_documents = load_documents(documents)
        if verbose:
            click.echo(f"  Documents: {len(parsed_documents)}")

        click.echo("Generating code...")
        generator = GolangGenerator(graphql_schema, config)
        code = generator.generate(parsed_documents)
    except (GenerationError, SchemaLoadError) as e:
        raise click.ClickException(str(e))
    except httpx.HTTPError as e:
        raise click.ClickException(f"Failed to fetch schema: {e}")

    if verbose:
        catalog = generator.catalog
        click.echo(f"  Scalars: {len(catalog.scalars)}")
        click.echo(f"  Enums: {len(catalog.enums)}")
        click.echo(f"  Inputs: {len(catalog.inputs)}")
        click.echo(f"  Objects: {len(catalog.objects)}")
        click.echo(f"  Operations: {len(generator.operations)}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    click.echo(f"Writing to {output_path}...")
    output_path.write_text(code + "\n")

    click.echo(f"Done! Generated {len(code.splitlines())} lines in {output_path}")


if __name__ == "__main__":
    main()
