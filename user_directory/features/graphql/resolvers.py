"""Query resolvers for users.

Provides read operations:
- users: All users in the context snapshot
- searchUsers(first, after, last, before): Relay cursor pagination
"""

from __future__ import annotations

import logging
from typing import Annotated

import strawberry
from strawberry.types import Info

from user_directory.core.exceptions import InvalidRequestException
from user_directory.features.graphql.context import GraphQLContext
from user_directory.features.graphql.error_handler import to_graphql_error
from user_directory.features.graphql.types import UserConnection, UserType
from user_directory.features.users.service import search_users

logger = logging.getLogger(__name__)

# Type aliases for annotated arguments
FirstArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (forward pagination)")
]
AfterArg = Annotated[
    str | None, strawberry.argument(description="Cursor to start after (forward pagination)")
]
LastArg = Annotated[
    int | None, strawberry.argument(description="Number of items to return (backward pagination)")
]
BeforeArg = Annotated[
    str | None, strawberry.argument(description="Cursor to end before (backward pagination)")
]


def users_query(info: Info[GraphQLContext, None]) -> list[UserType]:
    """Return every user in the context snapshot, in id order."""
    return [UserType.from_pydantic(user) for user in info.context.users]


def search_users_query(
    info: Info[GraphQLContext, None],
    first: FirstArg = None,
    after: AfterArg = None,
    last: LastArg = None,
    before: BeforeArg = None,
) -> UserConnection:
    """Return one page of users.

    Exactly one of the pairs first/after or last/before must be given.
    An unknown or malformed cursor restarts from the matching end of the list.
    """
    ctx = info.context
    try:
        connection = search_users(
            ctx.users,
            first=first,
            after=after,
            last=last,
            before=before,
            index=ctx.index,
            settings=ctx.pagination_settings,
        )
    except InvalidRequestException as e:
        logger.info("Rejected searchUsers arguments", extra={"detail": e.detail})
        raise to_graphql_error(e) from e

    return UserConnection.from_connection(connection)


__all__ = ["search_users_query", "users_query"]
