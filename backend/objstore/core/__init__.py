"""Core infrastructure for the object storage backend."""

from .config import ObjstoreSettings, settings
from .logging import (
    StorageOperationLogger,
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    error_context,
    get_logger,
)

__all__ = [
    # Configuration
    "ObjstoreSettings",
    "settings",
    # Logging
    "StorageOperationLogger",
    "bind_context",
    "clear_context",
    "configure_logging",
    "configure_logging_from_settings",
    "error_context",
    "get_logger",
]
