"""Pagination settings for cursor connections.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_MAX_LIMIT=100
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        cursor_prefix: Tag written in front of the record id before base64
            encoding. Changing it invalidates every cursor already handed
            out to clients.
        max_limit: Optional server-side cap on ``first``/``last``. Counts
            above the cap are reduced to it. ``None`` means no cap.

    Example:
        settings = PaginationSettings(max_limit=50)
        connection = paginate(users, request, settings=settings)
    """

    cursor_prefix: str = Field(
        default="user_",
        min_length=1,
        pattern=r"^[A-Za-z0-9_:-]+$",
        description="Tag prefixed to record ids inside cursors",
    )
    max_limit: int | None = Field(
        default=None,
        ge=1,
        le=100_000,
        description="Maximum page size (None disables the cap)",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
