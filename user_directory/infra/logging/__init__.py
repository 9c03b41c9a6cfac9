"""Logging setup for user-directory entrypoints."""

from user_directory.infra.logging.config import configure_logging, setup_logging
from user_directory.infra.logging.formatters import JSONFormatter

__all__ = ["JSONFormatter", "configure_logging", "setup_logging"]
