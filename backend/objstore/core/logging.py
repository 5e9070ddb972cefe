"""Structured logging configuration for the object storage backend.

This module configures structlog for consistent, machine-readable logging
and provides helpers for describing storage failures in log events.
"""

import logging
import sys
import time
from typing import TYPE_CHECKING, Any

import structlog
from structlog.typing import EventDict

from ..storage import StorageError, find_family

if TYPE_CHECKING:
    from .config import ObjstoreSettings


def add_app_context(
    _logger: Any, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add application-specific context to log events."""
    event_dict["service"] = "objstore"
    event_dict["component"] = event_dict.get("logger", "unknown")
    return event_dict


def configure_logging(
    environment: str = "development", log_level: str = "INFO", json_logs: bool = False
) -> None:
    """Configure structured logging for the application.

    Args:
        environment: Application environment (development/production)
        log_level: Logging level (DEBUG/INFO/WARNING/ERROR)
        json_logs: Whether to output JSON format logs
    """
    # Configure stdlib logging to work with structlog
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    if json_logs or environment == "production":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_settings(settings: "ObjstoreSettings") -> None:
    """Configure structured logging from application settings."""
    configure_logging(
        environment=settings.environment,
        log_level=settings.log_level,
        json_logs=settings.json_logs,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables for request tracing.

    Args:
        **kwargs: Context variables to bind (e.g., request_id, bucket)
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def error_context(error: BaseException) -> dict[str, Any]:
    """Build log event fields describing a failure.

    Args:
        error: Any exception; storage errors contribute their family and
            bucket/object identity

    Returns:
        Dict of log fields: ``error``, ``error_type`` and, where they apply,
        ``error_family``, ``bucket`` and ``object``
    """
    fields: dict[str, Any] = {
        "error": str(error),
        "error_type": type(error).__name__,
    }

    if isinstance(error, StorageError):
        family = find_family(error)
        if family is not None:
            fields["error_family"] = family.value

        for name in ("bucket", "object"):
            value = getattr(error, name, "")
            if value:
                fields[name] = value

    return fields


class StorageOperationLogger:
    """Helper for logging storage operation timing and failures."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger,
        operation: str,
        bucket: str = "",
        object: str = "",
    ):
        context: dict[str, Any] = {"operation": operation}
        if bucket:
            context["bucket"] = bucket
        if object:
            context["object"] = object
        self.logger = logger.bind(**context)
        self.operation = operation
        self.start_time: float | None = None

    def __enter__(self) -> "StorageOperationLogger":
        self.start_time = time.perf_counter()
        self.logger.debug("Storage operation started")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.start_time is None:
            return

        duration_ms = round((time.perf_counter() - self.start_time) * 1000, 2)

        if exc_type is None:
            self.logger.info("Storage operation completed", duration_ms=duration_ms)
        else:
            self.logger.error(
                "Storage operation failed",
                duration_ms=duration_ms,
                **error_context(exc_val),
            )

    def log_progress(self, message: str, **kwargs: Any) -> None:
        """Log operation progress with context."""
        self.logger.debug(message, **kwargs)
