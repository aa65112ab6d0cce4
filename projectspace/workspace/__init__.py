"""
Workspaces: a project plus the current user's settings for it.
"""

from .cache import (ReadWriteLock, WorkspaceCache, get_default_cache,
                    new_workspace, new_workspace_from, reset_default_cache)
from .settings import (Settings, read_settings, remove_settings, settings_path,
                       sha1_hex, write_settings)
from .workspace import Workspace, detect_project_path_from

__all__ = [
    # Classes
    "ReadWriteLock",
    "Settings",
    "Workspace",
    "WorkspaceCache",
    # Functions
    "detect_project_path_from",
    "get_default_cache",
    "new_workspace",
    "new_workspace_from",
    "read_settings",
    "remove_settings",
    "reset_default_cache",
    "settings_path",
    "sha1_hex",
    "write_settings",
]
