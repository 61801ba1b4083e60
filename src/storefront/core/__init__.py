"""Core Storefront utilities.

This module exports configuration and logging helpers for use throughout
the application.
"""

from storefront.core.config import Settings, get_settings
from storefront.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_correlation_id",
    "clear_context",
]
