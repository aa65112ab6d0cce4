"""
Unit tests for custom exceptions.

Tests exception hierarchy and error messages.
"""

from projectspace.core.schema import SchemaViolation
from projectspace.exceptions import (ConfigurationError, ManifestError,
                                     ManifestValidationError,
                                     ProjectNotFoundError, ProjectSpaceError)


class TestExceptionHierarchy:
    """Test exception inheritance hierarchy."""

    def test_base_error_is_runtime_error(self):
        """Test that ProjectSpaceError is a RuntimeError."""
        assert isinstance(ProjectSpaceError("test error"), RuntimeError)

    def test_manifest_errors(self):
        """Test that manifest errors share a base."""
        error = ManifestValidationError([SchemaViolation("#/a", "bad")])
        assert isinstance(error, ManifestError)
        assert isinstance(error, ProjectSpaceError)

    def test_other_errors(self):
        """Test the remaining error types."""
        assert isinstance(ProjectNotFoundError("missing"), ProjectSpaceError)
        assert isinstance(ConfigurationError("bad config"), ProjectSpaceError)


class TestExceptionMessages:
    """Test exception message formatting."""

    def test_base_error_with_context(self):
        """Test ProjectSpaceError message with context."""
        error = ProjectSpaceError("Something went wrong", context={"project": "p"})
        assert str(error) == "Something went wrong (context: project=p)"
        assert error.context == {"project": "p"}

    def test_manifest_error_is_bare(self):
        """Test that manifest errors are exactly their message."""
        assert str(ManifestError("expected a JSON object")) == "expected a JSON object"

    def test_validation_error_format(self):
        """Test the aggregated multi-error text."""
        error = ManifestValidationError(
            [
                SchemaViolation("#/main", "expected string, but got object"),
                SchemaViolation("#/backend", "expected string, but got number"),
            ]
        )
        assert str(error) == (
            "2 errors occurred:\n"
            "\t* #/main: expected string, but got object\n"
            "\t* #/backend: expected string, but got number\n"
            "\n"
        )
        assert error.error_paths == ["#/main", "#/backend"]

    def test_project_not_found_keeps_directory(self):
        """Test ProjectNotFoundError attributes."""
        error = ProjectNotFoundError("no Project.yaml project file found", directory="/tmp/x")
        assert str(error) == "no Project.yaml project file found"
        assert error.directory == "/tmp/x"

    def test_configuration_error_context(self):
        """Test ConfigurationError with key and value."""
        error = ConfigurationError("bad", config_key="PROJECTSPACE_HOME", config_value="rel")
        assert error.context == {"config_key": "PROJECTSPACE_HOME", "config_value": "rel"}
