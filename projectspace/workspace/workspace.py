"""
Workspace handles.

A workspace pairs a project, located by its manifest file, with the current
user's settings for that project. Use WorkspaceCache (or new_workspace_from)
to get one; building a Workspace directly bypasses the per-directory cache.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from ..config import WorkspaceConfig
from ..constants import MANIFEST_FILE_NAMES
from ..core.manifest import load_project
from .settings import (Settings, read_settings, remove_settings, settings_path,
                       write_settings)

logger = logging.getLogger(__name__)


def detect_project_path_from(directory: str) -> Optional[str]:
    """
    Find the manifest file governing a directory.

    Checks the directory and then each parent up to the filesystem root for
    one of MANIFEST_FILE_NAMES.

    Args:
        directory: Directory to start from

    Returns:
        Absolute path of the first manifest found, or None
    """
    current = Path(os.path.abspath(directory))
    for candidate_dir in (current, *current.parents):
        for file_name in MANIFEST_FILE_NAMES:
            candidate = candidate_dir / file_name
            if candidate.is_file():
                return str(candidate)
    return None


class Workspace:
    """
    A project plus the current user's settings for it.

    Attributes:
        name: Name of the project this workspace is associated with
        project_path: Path to the project's manifest file
    """

    def __init__(self, name: str, project_path: str, config: Optional[WorkspaceConfig] = None):
        self.name = name
        self.project_path = project_path
        self.config = config or WorkspaceConfig()
        self._settings = Settings()

    @classmethod
    def load(cls, project_path: str, config: Optional[WorkspaceConfig] = None) -> "Workspace":
        """
        Load the project at a manifest path, then its settings.

        Raises:
            ManifestError: If the manifest is invalid
            pydantic.ValidationError: If the settings file is malformed
        """
        project = load_project(project_path)
        workspace = cls(project.name, project_path, config=config)
        workspace.read_settings()
        return workspace

    @property
    def settings_path(self) -> Path:
        return settings_path(self.config, self.name, self.project_path)

    def settings(self) -> Settings:
        """Return the mutable settings for this workspace."""
        return self._settings

    def read_settings(self) -> None:
        """Replace the in-memory settings with the ones on disk (or defaults)."""
        settings = read_settings(self.settings_path)
        if settings.config_deprecated is None:
            settings.config_deprecated = {}
        self._settings = settings

    def save(self) -> None:
        """
        Persist the settings.

        Empty configuration entries are dropped first. If nothing remains,
        the settings file is deleted instead of written.
        """
        self._settings.prune_empty()

        path = self.settings_path
        if self._settings.is_empty():
            remove_settings(path)
            return

        write_settings(path, self._settings)

    def __repr__(self) -> str:
        return f"Workspace(name={self.name!r}, project_path={self.project_path!r})"
