"""Main CLI entry point for user-directory commands."""

import click

from user_directory import __version__
from user_directory.cli.commands import graphql, search
from user_directory.infra.logging import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="user-directory")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL for this invocation",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """User directory CLI.

    \b
    Commands:
      schema   Print the GraphQL SDL
      search   Paginate users from a JSON file
    """
    ctx.ensure_object(dict)
    overrides = {"log_level": log_level.upper()} if log_level else {}
    setup_logging(**overrides)


cli.add_command(graphql.schema)
cli.add_command(search.search)


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
