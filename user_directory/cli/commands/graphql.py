"""GraphQL schema commands."""

import click
from strawberry.printer import print_schema

from user_directory.cli.formatters import success
from user_directory.features.graphql import schema as graphql_schema


@click.command(name="schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to a file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema definition (SDL)."""
    sdl = print_schema(graphql_schema)
    if output is None:
        click.echo(sdl)
        return

    with open(output, "w", encoding="utf-8") as fh:
        fh.write(sdl + "\n")
    success(f"Schema written to {output}")
