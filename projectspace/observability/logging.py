"""
Logging utilities for PROJECTSPACE.

Provides structured logging that carries the workspace being resolved
(project name, directory) as context on every record.
"""

import contextvars
import logging
from datetime import datetime
from typing import Any

# Context variable for workspace context
_workspace_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "workspace_context", default=None
)


def set_workspace_context(directory: str | None = None, **kwargs: Any) -> contextvars.Token:
    """
    Set workspace context for logging.

    Args:
        directory: Absolute workspace directory
        **kwargs: Additional context (project_name, project_path, etc.)

    Returns:
        Token that restores the previous context when passed to
        clear_workspace_context()
    """
    context = {"directory": directory, **kwargs}
    return _workspace_context.set(context)


def clear_workspace_context(token: contextvars.Token | None = None) -> None:
    """Clear workspace context, restoring the previous one if a token is given."""
    if token is not None:
        _workspace_context.reset(token)
    else:
        _workspace_context.set(None)


def get_logging_context() -> dict[str, Any]:
    """
    Get current logging context.

    Returns:
        Dictionary with context information
    """
    context: dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
    }

    workspace_context = _workspace_context.get()
    if workspace_context:
        context.update(workspace_context)

    return context


class ContextualLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that automatically adds workspace context to log records.
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Add context to log records."""
        context = get_logging_context()

        extra = kwargs.get("extra", {})
        if extra:
            context.update(extra)

        kwargs["extra"] = context
        return msg, kwargs


def get_logger(name: str) -> ContextualLoggerAdapter:
    """
    Get a contextual logger that automatically adds workspace context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        ContextualLoggerAdapter instance
    """
    base_logger = logging.getLogger(name)
    return ContextualLoggerAdapter(base_logger, {})


def log_operation(
    logger: logging.Logger | logging.LoggerAdapter,
    operation: str,
    level: int = logging.DEBUG,
    success: bool = True,
    duration_ms: float | None = None,
    **context: Any,
) -> None:
    """
    Log an operation with structured context.

    Args:
        logger: Logger instance
        operation: Operation name
        level: Log level
        success: Whether operation succeeded
        duration_ms: Operation duration in milliseconds
        **context: Additional context
    """
    log_context: dict[str, Any] = {
        "operation": operation,
        "success": success,
    }

    if duration_ms is not None:
        log_context["duration_ms"] = round(duration_ms, 2)

    if context:
        log_context.update(context)

    message = f"Operation: {operation}"
    if not success:
        message = f"Operation failed: {operation}"
    if duration_ms is not None:
        message += f" (duration: {duration_ms:.2f}ms)"

    logger.log(level, message, extra=log_context)
