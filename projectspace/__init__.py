"""
PROJECTSPACE - project manifests and workspaces

Loads and validates project manifests (JSON or YAML) and keeps per-user,
per-project workspace settings.
"""

from .config import WorkspaceConfig
# Core manifest handling
from .core import (ManifestParser, ManifestSyntax, Project, RuntimeDescriptor,
                   SchemaValidator, SchemaViolation, decode_project,
                   load_project)
from .exceptions import (ConfigurationError, ManifestError,
                         ManifestValidationError, ProjectNotFoundError,
                         ProjectSpaceError)
# Workspaces
from .workspace import (Settings, Workspace, WorkspaceCache, new_workspace,
                        new_workspace_from)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ManifestParser",
    "ManifestSyntax",
    "Project",
    "RuntimeDescriptor",
    "SchemaValidator",
    "SchemaViolation",
    "decode_project",
    "load_project",
    # Workspaces
    "Settings",
    "Workspace",
    "WorkspaceCache",
    "WorkspaceConfig",
    "new_workspace",
    "new_workspace_from",
    # Errors
    "ProjectSpaceError",
    "ManifestError",
    "ManifestValidationError",
    "ProjectNotFoundError",
    "ConfigurationError",
]
