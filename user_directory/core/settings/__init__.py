"""Pydantic Settings v2 configuration, one module per domain.

Import settings via cached loaders:
    from user_directory.core.settings import get_pagination_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .graphql import GraphQLSettings
from .loader import (
    clear_all_caches,
    get_graphql_settings,
    get_logging_settings,
    get_pagination_settings,
)
from .logs import LoggingSettings
from .pagination import PaginationSettings

__all__ = [
    "GraphQLSettings",
    "LoggingSettings",
    "PaginationSettings",
    "clear_all_caches",
    "get_graphql_settings",
    "get_logging_settings",
    "get_pagination_settings",
]
