"""GraphQL test fixtures.

Provides:
- Context carrying the ordered user snapshot
- Query documents shared across tests
"""

from __future__ import annotations

import pytest

from user_directory.features.graphql import GraphQLContext

SEARCH_USERS_QUERY = """
    query SearchUsers($first: Int, $after: String, $last: Int, $before: String) {
        searchUsers(first: $first, after: $after, last: $last, before: $before) {
            edges {
                cursor
                node {
                    id
                    name
                    email
                    avatar
                }
            }
            pageInfo {
                hasNextPage
                hasPreviousPage
                startCursor
                endCursor
            }
        }
    }
"""

USERS_QUERY = """
    query Users {
        users {
            id
            name
        }
    }
"""


@pytest.fixture
def graphql_context(users) -> GraphQLContext:
    """Context with users 1..10."""
    return GraphQLContext(users=users)


@pytest.fixture
def search_users_query() -> str:
    return SEARCH_USERS_QUERY


@pytest.fixture
def users_query() -> str:
    return USERS_QUERY
