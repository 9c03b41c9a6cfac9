"""Search users from a JSON file with cursor pagination.

Examples:

\b
  user-directory search users.json --first 10 --after ""
  user-directory search users.json --last 5 --before dXNlcl8xMA==
"""

import json

import click
from pydantic import ValidationError

from user_directory.cli.formatters import error
from user_directory.core.exceptions import InvalidRequestException
from user_directory.features.users import load_users, search_users


@click.command(name="search")
@click.argument("users_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--first", type=int, default=None, help="Number of users after --after")
@click.option("--after", type=str, default=None, help="Cursor to start after")
@click.option("--last", type=int, default=None, help="Number of users before --before")
@click.option("--before", type=str, default=None, help="Cursor to end before")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
def search(
    users_file: str,
    first: int | None,
    after: str | None,
    last: int | None,
    before: str | None,
    indent: int,
) -> None:
    """Print one page of the users in USERS_FILE as a JSON connection.

    USERS_FILE is a JSON array of user objects with id, name, email and avatar.
    """
    try:
        users = load_users(users_file)
    except (ValidationError, ValueError) as e:
        error(f"Cannot load users from {users_file}: {e}")
        raise SystemExit(1) from e

    try:
        connection = search_users(users, first=first, after=after, last=last, before=before)
    except InvalidRequestException as e:
        error(e.detail)
        raise SystemExit(1) from e

    click.echo(json.dumps(connection.model_dump(mode="json", by_alias=True), indent=indent))
