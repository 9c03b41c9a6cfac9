"""Pagination request and response schemas.

Requests follow the Relay cursor connection arguments and come in two
mutually exclusive shapes:

- Forward: ``first`` records after the ``after`` cursor
- Backward: ``last`` records before the ``before`` cursor

Responses follow the Relay Connection pattern: a list of edges, each with
a node and its cursor, plus page info describing the neighbouring pages.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, ValidationError

from user_directory.core.exceptions import InvalidRequestException

T = TypeVar("T")


# ──────────────────────────────────────────────────────────────
# Requests
# ──────────────────────────────────────────────────────────────


class ForwardArgs(BaseModel):
    """Validated forward window: ``first`` records after ``after``."""

    first: int = Field(ge=0, description="Number of records to return")
    after: str = Field(description="Cursor to start after (exclusive)")

    model_config = {"frozen": True}


class BackwardArgs(BaseModel):
    """Validated backward window: ``last`` records before ``before``."""

    last: int = Field(ge=0, description="Number of records to return")
    before: str = Field(description="Cursor to end before (exclusive)")

    model_config = {"frozen": True}


PaginationArgs = ForwardArgs | BackwardArgs


class PaginationRequest(BaseModel):
    """Raw pagination arguments as received from a client.

    Any field may be missing here; ``resolve()`` checks that exactly one
    complete pair is present and returns the matching window.

    Usage:
        request = PaginationRequest(first=10, after=cursor)
        args = request.resolve()  # ForwardArgs(first=10, after=cursor)
    """

    first: int | None = Field(default=None, description="Number of records after the cursor")
    after: str | None = Field(default=None, description="Cursor to start after (exclusive)")
    last: int | None = Field(default=None, description="Number of records before the cursor")
    before: str | None = Field(default=None, description="Cursor to end before (exclusive)")

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def from_arguments(cls, **arguments: Any) -> PaginationRequest:
        """Build a request from loosely typed arguments.

        Raises:
            InvalidRequestException: If an argument has the wrong type
        """
        try:
            return cls(**arguments)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise InvalidRequestException(
                detail=f"Invalid pagination arguments: {', '.join(fields) or 'unknown'}",
                extra={"fields": fields},
            ) from e

    @property
    def has_forward_args(self) -> bool:
        return self.first is not None and self.after is not None

    @property
    def has_backward_args(self) -> bool:
        return self.last is not None and self.before is not None

    def resolve(self) -> PaginationArgs:
        """Validate the argument pairs and return the requested window.

        Raises:
            InvalidRequestException: If no pair or only part of a pair is
                present, both pairs are present, or a count is negative
        """
        if not self.has_forward_args and not self.has_backward_args:
            raise InvalidRequestException(
                detail="Either first and after must be specified or last and before.",
            )
        if (self.first is None) != (self.after is None):
            raise InvalidRequestException(
                detail="Cannot specify first without after and vice-versa.",
                extra={"first": self.first, "after": self.after},
            )
        if (self.last is None) != (self.before is None):
            raise InvalidRequestException(
                detail="Cannot specify last without before and vice-versa.",
                extra={"last": self.last, "before": self.before},
            )
        if self.has_forward_args and self.has_backward_args:
            raise InvalidRequestException(
                detail="Cannot combine forward (first/after) and backward (last/before) arguments.",
            )

        if self.has_forward_args:
            if self.first < 0:
                raise InvalidRequestException(
                    detail="first cannot be negative",
                    extra={"first": self.first},
                )
            return ForwardArgs(first=self.first, after=self.after)

        if self.last < 0:
            raise InvalidRequestException(
                detail="last cannot be negative",
                extra={"last": self.last},
            )
        return BackwardArgs(last=self.last, before=self.before)


# ──────────────────────────────────────────────────────────────
# Responses
# ──────────────────────────────────────────────────────────────


class PageInfo(BaseModel):
    """Pagination metadata following GraphQL Relay specification.

    Attributes:
        has_previous_page: Whether records exist before the window
        has_next_page: Whether records exist after the window
        start_cursor: Cursor of the first edge (None when there are no edges)
        end_cursor: Cursor of the last edge (None when there are no edges)
    """

    has_previous_page: bool = Field(
        serialization_alias="hasPreviousPage",
        description="Whether previous records exist",
    )
    has_next_page: bool = Field(
        serialization_alias="hasNextPage",
        description="Whether more records exist",
    )
    start_cursor: str | None = Field(
        default=None,
        serialization_alias="startCursor",
        description="Cursor of the first record",
    )
    end_cursor: str | None = Field(
        default=None,
        serialization_alias="endCursor",
        description="Cursor of the last record",
    )

    model_config = {"frozen": True}


class Edge(BaseModel, Generic[T]):
    """Edge wrapper for a paginated record (Relay pattern).

    Attributes:
        node: The record itself
        cursor: Cursor naming this record
    """

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")

    model_config = {"frozen": True}


class Connection(BaseModel, Generic[T]):
    """Relay Connection: one page of records with cursors.

    Client navigation:
        # First page
        search_users(users, first=10, after="")

        # Next page (using end_cursor from previous response)
        search_users(users, first=10, after=page.page_info.end_cursor)

        # Previous page (using start_cursor)
        search_users(users, last=10, before=page.page_info.start_cursor)
    """

    edges: list[Edge[T]] = Field(
        default_factory=list,
        description="List of edges (records with cursors)",
    )
    page_info: PageInfo = Field(
        serialization_alias="pageInfo",
        description="Pagination metadata",
    )

    model_config = {"frozen": True}

    @property
    def nodes(self) -> list[T]:
        """Get just the records without edge wrappers."""
        return [edge.node for edge in self.edges]


__all__ = [
    "BackwardArgs",
    "Connection",
    "Edge",
    "ForwardArgs",
    "PageInfo",
    "PaginationArgs",
    "PaginationRequest",
]
