"""
Per-process workspace cache.

WorkspaceCache maps absolute directories to Workspace handles so that every
caller in a process resolving the same directory shares one handle. Lookups
take a shared (read) lock and may run concurrently; inserts take the
exclusive (write) lock. Entries are never evicted: a process sees the
manifest and settings as they were when the directory was first resolved.

Usage:
    cache = WorkspaceCache()
    workspace = cache.get_or_create("/path/to/project")

    # Or through the process-wide default cache
    workspace = new_workspace_from("/path/to/project")
"""

import os
import threading
import time
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Optional

from ..config import WorkspaceConfig
from ..constants import MANIFEST_FILE_NAMES
from ..exceptions import ProjectNotFoundError
from ..observability.logging import (clear_workspace_context, get_logger,
                                     log_operation, set_workspace_context)
from .workspace import Workspace, detect_project_path_from

logger = get_logger(__name__)

ProjectDetector = Callable[[str], Optional[str]]


class ReadWriteLock:
    """
    A reader/writer lock.

    Any number of readers may hold the lock at once; a writer holds it
    alone. Waiting writers block new readers so writers can't starve.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class WorkspaceCache:
    """
    Directory -> Workspace cache.

    Attributes:
        config: Workspace configuration handed to every workspace created
        detector: Finds the manifest path for a directory (None if absent)
    """

    def __init__(
        self,
        config: Optional[WorkspaceConfig] = None,
        detector: ProjectDetector = detect_project_path_from,
    ):
        self.config = config or WorkspaceConfig()
        self.config.validate()
        self.detector = detector
        self._workspaces: Dict[str, Workspace] = {}
        self._lock = ReadWriteLock()

    def get(self, directory: str) -> Optional[Workspace]:
        """Return the cached workspace for a directory, if any."""
        with self._lock.read_locked():
            return self._workspaces.get(os.path.abspath(directory))

    def _insert(self, key: str, workspace: Workspace) -> Workspace:
        if workspace is None:
            raise ValueError("workspace is required")

        # First insert wins so racing creators all end up with one handle
        with self._lock.write_locked():
            return self._workspaces.setdefault(key, workspace)

    def get_or_create(self, directory: str) -> Workspace:
        """
        Get the workspace for a directory, creating it on first use.

        Args:
            directory: Directory inside the project (made absolute)

        Returns:
            Workspace for the directory

        Raises:
            ProjectNotFoundError: If no manifest governs the directory
            ManifestError: If the manifest is invalid
            pydantic.ValidationError: If the settings file is malformed
        """
        directory = os.path.abspath(directory)

        with self._lock.read_locked():
            workspace = self._workspaces.get(directory)
        if workspace is not None:
            logger.debug(f"Workspace cache hit for {directory}")
            return workspace

        start_time = time.perf_counter()
        token = set_workspace_context(directory=directory)
        try:
            path = self.detector(directory)
            if not path:
                raise ProjectNotFoundError(
                    f"no {MANIFEST_FILE_NAMES[0]} project file found", directory=directory
                )

            workspace = self._insert(directory, Workspace.load(path, config=self.config))

            duration_ms = (time.perf_counter() - start_time) * 1000
            log_operation(
                logger,
                "workspace.create",
                duration_ms=duration_ms,
                project_name=workspace.name,
                project_path=path,
            )
            return workspace
        finally:
            clear_workspace_context(token)

    def __contains__(self, directory: str) -> bool:
        return self.get(directory) is not None

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._workspaces)


# Process-wide default cache
_default_cache: Optional[WorkspaceCache] = None
_default_cache_lock = threading.Lock()


def get_default_cache() -> WorkspaceCache:
    """
    Get or create the process-wide workspace cache.

    The cache is configured from the environment the first time it is
    requested.
    """
    global _default_cache

    if _default_cache is not None:
        return _default_cache

    with _default_cache_lock:
        # Another thread may have created it while we waited
        if _default_cache is None:
            _default_cache = WorkspaceCache()
        return _default_cache


def reset_default_cache() -> None:
    """Drop the process-wide cache. Intended for tests."""
    global _default_cache
    with _default_cache_lock:
        _default_cache = None


def new_workspace_from(directory: str) -> Workspace:
    """Get the workspace for a directory from the process-wide cache."""
    return get_default_cache().get_or_create(directory)


def new_workspace() -> Workspace:
    """Get the workspace for the current working directory."""
    return new_workspace_from(os.getcwd())
