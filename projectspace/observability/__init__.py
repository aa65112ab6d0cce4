"""
Observability helpers for PROJECTSPACE.
"""

from .logging import (ContextualLoggerAdapter, clear_workspace_context,
                      get_logger, get_logging_context, log_operation,
                      set_workspace_context)

__all__ = [
    "ContextualLoggerAdapter",
    "clear_workspace_context",
    "get_logger",
    "get_logging_context",
    "log_operation",
    "set_workspace_context",
]
