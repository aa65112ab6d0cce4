"""
Configuration management for PROJECTSPACE.

Settings files live under a per-user bookkeeping root. The root defaults to
``~/.projectspace`` and can be moved with the PROJECTSPACE_HOME environment
variable or by passing it directly.
"""

import os
from pathlib import Path

from .constants import BOOKKEEPING_DIR, HOME_ENV_VAR, WORKSPACE_DIR
from .exceptions import ConfigurationError


class WorkspaceConfig:
    """
    Workspace configuration.

    Example:
        # Using environment variables / the user's home directory
        config = WorkspaceConfig()

        # Or using direct parameters
        config = WorkspaceConfig(bookkeeping_root="/tmp/projectspace")
    """

    def __init__(self, bookkeeping_root: str | os.PathLike | None = None):
        """
        Initialize configuration.

        Args:
            bookkeeping_root: Directory holding per-user bookkeeping files
                (defaults to PROJECTSPACE_HOME, then ~/.projectspace)
        """
        root = bookkeeping_root or os.getenv(HOME_ENV_VAR, "")
        if not root:
            root = Path.home() / BOOKKEEPING_DIR
        self.bookkeeping_root = Path(root)

    @property
    def workspaces_dir(self) -> Path:
        """Directory holding workspace settings files."""
        return self.bookkeeping_root / WORKSPACE_DIR

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If the bookkeeping root is not an absolute path
        """
        if not self.bookkeeping_root.is_absolute():
            raise ConfigurationError(
                "bookkeeping root must be an absolute path",
                config_key=HOME_ENV_VAR,
                config_value=str(self.bookkeeping_root),
            )

    def __repr__(self) -> str:
        return f"WorkspaceConfig(bookkeeping_root={str(self.bookkeeping_root)!r})"
