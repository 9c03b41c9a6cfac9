"""GraphQL schema for the user directory.

Usage:
    from user_directory.features.graphql import GraphQLContext, schema

    result = schema.execute_sync(
        "{ searchUsers(first: 2, after: \"\") { edges { cursor node { id } } } }",
        context_value=GraphQLContext(users=users),
    )
"""

from user_directory.features.graphql.context import GraphQLContext
from user_directory.features.graphql.schema import create_schema, schema

__all__ = ["GraphQLContext", "create_schema", "schema"]
