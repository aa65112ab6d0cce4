"""
Constants for PROJECTSPACE.

This module contains all shared constants used across the codebase to avoid
magic numbers and magic strings.
"""

from typing import Final

# ============================================================================
# MANIFEST CONSTANTS
# ============================================================================

MANIFEST_FILE_NAMES: Final[tuple[str, ...]] = (
    "Project.yaml",
    "Project.yml",
    "Project.json",
)
"""Manifest file names searched for in each directory, in priority order."""

JSON_EXTENSIONS: Final[tuple[str, ...]] = (".json",)
"""File extensions decoded with the JSON syntax."""

YAML_EXTENSIONS: Final[tuple[str, ...]] = (".yaml", ".yml")
"""File extensions decoded with the YAML syntax."""

SCHEMA_PATH_PREFIX: Final[str] = "#/"
"""Prefix of every document path reported in schema violations."""

# ============================================================================
# WORKSPACE CONSTANTS
# ============================================================================

BOOKKEEPING_DIR: Final[str] = ".projectspace"
"""Per-user bookkeeping directory, relative to the home directory."""

WORKSPACE_DIR: Final[str] = "workspaces"
"""Sub-directory of the bookkeeping directory holding workspace settings."""

WORKSPACE_FILE: Final[str] = "workspace.json"
"""Suffix of every workspace settings file name."""

SETTINGS_INDENT: Final[int] = 4
"""Indentation used when writing settings files."""

SETTINGS_DIR_MODE: Final[int] = 0o700
"""Permissions for created settings directories (owner only)."""

SETTINGS_FILE_MODE: Final[int] = 0o600
"""Permissions for written settings files (owner read/write only)."""

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

HOME_ENV_VAR: Final[str] = "PROJECTSPACE_HOME"
"""Overrides the bookkeeping root (defaults to ~/.projectspace)."""
