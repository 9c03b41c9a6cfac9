"""GraphQL context for request-scoped dependencies.

The record sequence is passed in by the caller for every execution instead
of living in a module-level store, so each request sees one consistent
snapshot.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from user_directory.core.pagination import PositionIndex
from user_directory.core.settings import PaginationSettings
from user_directory.features.users.schemas import UserResponse


@dataclass
class GraphQLContext:
    """Request context for GraphQL operations.

    Fields:
    - users: Users sorted ascending by id
    - index: Optional precomputed position lookup over ``users``
    - pagination_settings: Optional override of the cached pagination settings

    Example usage in resolver:
        def users_query(info: Info[GraphQLContext, None]) -> list[UserType]:
            return [UserType.from_pydantic(user) for user in info.context.users]
    """

    users: Sequence[UserResponse] = field(default_factory=list)
    index: PositionIndex | None = None
    pagination_settings: PaginationSettings | None = None
