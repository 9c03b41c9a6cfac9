"""Search users with Relay cursor pagination."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from user_directory.core.pagination import (
    Connection,
    PaginationRequest,
    PositionIndex,
    paginate,
)
from user_directory.core.settings import PaginationSettings
from user_directory.features.users.schemas import UserResponse

logger = logging.getLogger(__name__)


def search_users(
    users: Sequence[UserResponse],
    *,
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
    index: PositionIndex | None = None,
    settings: PaginationSettings | None = None,
) -> Connection[UserResponse]:
    """Return a page of ``users``.

    Arguments are forwarded exactly as received from the client. Exactly
    one of the pairs ``first``/``after`` or ``last``/``before`` must be given.

    Args:
        users: Users sorted ascending by id
        first: Number of users following ``after``
        after: The first user returned comes after this cursor
        last: Number of users preceding ``before``
        before: The last user returned comes before this cursor
        index: Optional precomputed position lookup for ``users``
        settings: Optional pagination settings override

    Raises:
        InvalidRequestException: If the arguments are malformed
    """
    request = PaginationRequest.from_arguments(first=first, after=after, last=last, before=before)
    connection = paginate(users, request, index=index, settings=settings)
    logger.debug("Searched users", extra={"returned": len(connection.edges)})
    return connection
