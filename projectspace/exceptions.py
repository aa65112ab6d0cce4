"""
Custom exceptions for PROJECTSPACE.

These exceptions provide more specific error types while maintaining
compatibility with RuntimeError.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from .core.schema import SchemaViolation


class ProjectSpaceError(RuntimeError):
    """
    Base exception for PROJECTSPACE errors.

    Attributes:
        message: Error message
        context: Optional dictionary with additional context (project name,
                 directory, etc.)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            context: Optional dictionary with additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class ManifestError(ProjectSpaceError):
    """
    Raised when a manifest has the wrong shape or lacks a required attribute.

    The message is always the bare, fixed-format text so callers and
    downstream tooling can match on it.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ManifestValidationError(ManifestError):
    """
    Raised when a manifest fails schema validation.

    Every violation reported by the schema validator is kept, in the order
    the validator reported it, and rendered into a single message:

        2 errors occurred:
        \\t* #/main: expected string, but got object
        \\t* #/backend: expected string, but got number

    Attributes:
        violations: Structured violations (path, message)
        error_paths: Document paths of the violations, in order
    """

    def __init__(self, violations: List["SchemaViolation"]) -> None:
        self.violations = list(violations)
        self.error_paths = [violation.path for violation in self.violations]
        super().__init__(self.format_violations(self.violations))

    @staticmethod
    def format_violations(violations: List["SchemaViolation"]) -> str:
        """Join violations into the aggregated multi-error text."""
        lines = [f"\t* {violation}" for violation in violations]
        return f"{len(violations)} errors occurred:\n" + "\n".join(lines) + "\n\n"


class ProjectNotFoundError(ProjectSpaceError):
    """
    Raised when no manifest file can be found for a directory.

    Attributes:
        directory: Directory the search started from
    """

    def __init__(self, message: str, directory: Optional[str] = None) -> None:
        super().__init__(message)
        self.directory = directory


class ConfigurationError(ProjectSpaceError):
    """
    Raised when configuration is invalid or missing.

    Attributes:
        message: Error message
        config_key: Configuration key that caused the error (if available)
        config_value: Configuration value that caused the error (if available)
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the configuration error.

        Args:
            message: Error message
            config_key: Configuration key that caused the error (if available)
            config_value: Configuration value that caused the error (if available)
            context: Additional context information
        """
        context = context or {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = config_value
        super().__init__(message, context=context)
        self.config_key = config_key
        self.config_value = config_value
