"""GraphQL error classification and masking.

Errors raised on purpose for clients carry an ``extensions.code`` from
``ErrorCategory`` and are returned as-is. Any other exception raised by a
resolver is masked when ``GraphQLSettings.mask_errors`` is on.
"""

from __future__ import annotations

import logging

from graphql import GraphQLError

from user_directory.core.exceptions import AppException

logger = logging.getLogger(__name__)


class ErrorCategory:
    """Error categories for classification."""

    VALIDATION = "VALIDATION_ERROR"
    INTERNAL = "INTERNAL_ERROR"


USER_FACING_CODES = frozenset({ErrorCategory.VALIDATION})


def to_graphql_error(exc: AppException) -> GraphQLError:
    """Convert an application exception to a user-facing GraphQL error.

    The extensions carry the RFC 7807 problem details next to the error code.
    """
    return GraphQLError(
        exc.detail,
        original_error=exc,
        extensions={"code": ErrorCategory.VALIDATION, **exc.to_problem_details()},
    )


def is_user_facing_error(error: GraphQLError) -> bool:
    """Whether the error message is safe to show to clients."""
    extensions = error.extensions or {}
    return extensions.get("code") in USER_FACING_CODES


def should_mask_error(error: GraphQLError) -> bool:
    """Mask unexpected resolver exceptions only.

    Parse and validation errors have no original exception and are kept.
    """
    if error.original_error is None or is_user_facing_error(error):
        return False
    logger.error(
        "Unexpected GraphQL resolver error",
        exc_info=error.original_error,
        extra={"error_path": error.path},
    )
    return True


__all__ = [
    "ErrorCategory",
    "is_user_facing_error",
    "should_mask_error",
    "to_graphql_error",
]
