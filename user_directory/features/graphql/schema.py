"""GraphQL schema assembly."""

from __future__ import annotations

import logging

import strawberry
from strawberry.extensions import MaskErrors

from user_directory.core.settings import GraphQLSettings, get_graphql_settings
from user_directory.features.graphql.error_handler import should_mask_error
from user_directory.features.graphql.resolvers import search_users_query, users_query
from user_directory.features.graphql.types import UserConnection, UserType

logger = logging.getLogger(__name__)


@strawberry.type
class Query:
    users: list[UserType] = strawberry.field(
        resolver=users_query,
        description="All users, ordered by id",
    )
    search_users: UserConnection = strawberry.field(
        resolver=search_users_query,
        description="Users paginated with Relay cursor connection arguments",
    )


def create_schema(settings: GraphQLSettings | None = None) -> strawberry.Schema:
    """Build the schema with extensions chosen by ``settings``."""
    settings = settings or get_graphql_settings()

    extensions = []
    if settings.mask_errors:
        extensions.append(MaskErrors(should_mask_error=should_mask_error))

    return strawberry.Schema(query=Query, extensions=extensions)


schema = create_schema()

__all__ = ["Query", "create_schema", "schema"]
