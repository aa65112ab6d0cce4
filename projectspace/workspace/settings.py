"""
Per-user, per-project workspace settings.

Settings are stored as JSON under the bookkeeping root:

    <root>/workspaces/<project-name>-<sha1(project-path)>-workspace.json

A missing file reads as empty settings. Empty settings are never written;
saving them removes the file instead, so stale files don't pile up in the
user's home directory.
"""

import hashlib
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..config import WorkspaceConfig
from ..constants import (SETTINGS_DIR_MODE, SETTINGS_FILE_MODE,
                         SETTINGS_INDENT, WORKSPACE_FILE)

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """
    Settings for a single workspace.

    Attributes:
        config_deprecated: Legacy configuration, keyed by namespaced name
            (serialized as "config"). Its inner maps are opaque here.
    """

    model_config = ConfigDict(populate_by_name=True)

    config_deprecated: Optional[Dict[str, Optional[Dict[str, Any]]]] = Field(
        default=None, alias="config"
    )

    @model_validator(mode="before")
    @classmethod
    def _null_document(cls, data: Any) -> Any:
        # A "null" settings file loads as empty settings
        return {} if data is None else data

    def is_empty(self) -> bool:
        return not self.config_deprecated

    def prune_empty(self) -> None:
        """Drop configuration entries whose inner map is empty (one level only)."""
        if not self.config_deprecated:
            return
        for key in [k for k, v in self.config_deprecated.items() if not v]:
            del self.config_deprecated[key]


def sha1_hex(value: str) -> str:
    """Return the hex SHA-1 digest of a string."""
    return hashlib.sha1(value.encode("utf-8")).hexdigest()


def settings_path(config: WorkspaceConfig, project_name: str, project_path: str) -> Path:
    """
    Compute the settings file for a project.

    Args:
        config: Workspace configuration (provides the bookkeeping root)
        project_name: Name of the project
        project_path: Absolute path of the project's manifest file

    Returns:
        Path of the settings file
    """
    unique_file_name = f"{project_name}-{sha1_hex(str(project_path))}-{WORKSPACE_FILE}"
    return config.workspaces_dir / unique_file_name


def read_settings(path: Path) -> Settings:
    """
    Read settings from a file.

    Returns:
        Settings from the file, or empty Settings if the file doesn't exist

    Raises:
        pydantic.ValidationError: If the file isn't valid settings JSON
        OSError: If the file exists but can't be read
    """
    try:
        content = path.read_bytes()
    except FileNotFoundError:
        logger.debug(f"No settings file at {path}, using defaults")
        return Settings()

    return Settings.model_validate_json(content)


def _make_private_dirs(directory: Path) -> None:
    """Create a directory and any missing ancestors, each owner-only."""
    missing = []
    while not directory.exists():
        missing.append(directory)
        directory = directory.parent
    for created in reversed(missing):
        try:
            created.mkdir(mode=SETTINGS_DIR_MODE)
        except FileExistsError:
            continue


def write_settings(path: Path, settings: Settings) -> None:
    """Write settings as indented JSON, readable only by the owner."""
    _make_private_dirs(path.parent)

    content = settings.model_dump_json(by_alias=True, indent=SETTINGS_INDENT)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, SETTINGS_FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(content)
    logger.debug(f"Wrote settings file {path}")


def remove_settings(path: Path) -> None:
    """Remove a settings file; an already-absent file is not an error."""
    try:
        os.remove(path)
    except FileNotFoundError:
        return
    logger.debug(f"Removed empty settings file {path}")
