"""Logging configuration setup.

Builds a ``logging.config.dictConfig`` with a single console handler on the
root logger. Application loggers are created with
``logging.getLogger(__name__)`` and propagate to it.
"""

from __future__ import annotations

import logging
import logging.config
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from user_directory.core.settings.logs import LoggingSettings

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from user_directory.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    log_config = {**settings_obj.to_logging_kwargs(), **configure_kwargs}
    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    service_name: str = "user-directory",
    console_enabled: bool = True,
    capture_warnings: bool = True,
) -> dict[str, Any]:
    """Configure the root logger with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Emit JSON Lines instead of human-readable text.
        service_name: Static ``service`` field on JSON records.
        console_enabled: Attach a stderr handler.
        capture_warnings: Forward Python warnings to logging system.

    Returns:
        The dictConfig mapping that was applied.

    Example:
        from user_directory.core.settings import get_logging_settings
        configure_logging(**get_logging_settings().to_logging_kwargs())
    """
    logging.captureWarnings(capture_warnings)

    formatter_name = "json" if json_logs else "text"
    handlers: dict[str, Any] = {}
    if console_enabled:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": formatter_name,
            "level": log_level.upper(),
        }

    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _build_formatters_config(json_logs, service_name),
        "handlers": handlers,
        "root": {
            "level": log_level.upper(),
            "handlers": list(handlers),
        },
    }

    logging.config.dictConfig(logging_config)
    logger.debug("Logging configured", extra={"json_logs": json_logs, "level": log_level})
    return logging_config


def _build_formatters_config(json_logs: bool, service_name: str) -> dict[str, Any]:
    """Build formatters configuration for dictConfig."""
    if json_logs:
        return {
            "json": {
                "()": "user_directory.infra.logging.formatters.JSONFormatter",
                "static": {"service": service_name},
            }
        }
    return {
        "text": {
            "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }
    }
