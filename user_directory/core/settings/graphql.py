"""GraphQL schema settings.

Environment variables use GRAPHQL_ prefix.
Example: GRAPHQL_MASK_ERRORS=false
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphQLSettings(BaseSettings):
    """GraphQL schema configuration."""

    mask_errors: bool = Field(
        default=True,
        description="Hide messages of unexpected (non user-facing) errors from clients",
    )

    model_config = SettingsConfigDict(
        env_prefix="GRAPHQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
