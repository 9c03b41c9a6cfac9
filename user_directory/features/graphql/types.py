"""GraphQL types for users and Relay pagination.

Mirrors user_directory.core.pagination.schemas as Strawberry types.
"""

from __future__ import annotations

from typing import Any

import strawberry
import strawberry.experimental.pydantic

from user_directory.core.pagination import Connection
from user_directory.features.users.schemas import UserResponse


@strawberry.type(description="Pagination metadata following GraphQL Relay specification")
class PageInfoType:
    """GraphQL Relay PageInfo for cursor-based pagination."""

    has_previous_page: bool = strawberry.field(description="Whether previous items exist")
    has_next_page: bool = strawberry.field(description="Whether more items exist")
    start_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the last item",
    )


@strawberry.experimental.pydantic.type(
    model=UserResponse,
    all_fields=True,
    description="A user in the directory",
)
class UserType:
    """User type auto-generated from the UserResponse Pydantic schema."""


@strawberry.type(description="Edge containing a User node and cursor")
class UserEdge:
    node: UserType = strawberry.field(description="The user")
    cursor: str = strawberry.field(description="Opaque cursor for this edge used in pagination")


@strawberry.type(description="Relay connection for User with cursor-based pagination")
class UserConnection:
    edges: list[UserEdge] = strawberry.field(
        description="List of edges containing nodes and their cursors"
    )
    page_info: PageInfoType = strawberry.field(
        description="Pagination information including hasNextPage, hasPreviousPage, etc."
    )

    @classmethod
    def from_connection(cls, connection: Connection[Any]) -> UserConnection:
        """Convert a core pagination connection of UserResponse nodes."""
        page_info = connection.page_info
        return cls(
            edges=[
                UserEdge(node=UserType.from_pydantic(edge.node), cursor=edge.cursor)
                for edge in connection.edges
            ],
            page_info=PageInfoType(
                has_previous_page=page_info.has_previous_page,
                has_next_page=page_info.has_next_page,
                start_cursor=page_info.start_cursor,
                end_cursor=page_info.end_cursor,
            ),
        )


__all__ = ["PageInfoType", "UserConnection", "UserEdge", "UserType"]
