"""
Pytest configuration and shared fixtures for PROJECTSPACE tests.

This module provides:
- An isolated bookkeeping root per test
- Manifest file factories
- Common test data
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
import yaml

from projectspace.config import WorkspaceConfig
from projectspace.workspace import WorkspaceCache, reset_default_cache

# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================


@pytest.fixture
def bookkeeping_root(tmp_path, monkeypatch) -> Path:
    """Point the per-user bookkeeping root at a temporary directory."""
    root = tmp_path / "home" / ".projectspace"
    monkeypatch.setenv("PROJECTSPACE_HOME", str(root))
    reset_default_cache()
    yield root
    reset_default_cache()


@pytest.fixture
def workspace_config(bookkeeping_root) -> WorkspaceConfig:
    """Workspace configuration rooted in the temporary bookkeeping root."""
    return WorkspaceConfig(bookkeeping_root=bookkeeping_root)


@pytest.fixture
def workspace_cache(workspace_config) -> WorkspaceCache:
    """A fresh workspace cache."""
    return WorkspaceCache(config=workspace_config)


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================


@pytest.fixture
def sample_manifest() -> Dict[str, Any]:
    """A valid project manifest."""
    return {
        "name": "test-project",
        "runtime": {"name": "nodejs", "options": {"typescript": True}},
        "description": "A test project",
        "main": "src/index.ts",
        "backend": "https://backend.example.com",
    }


@pytest.fixture
def write_manifest(tmp_path) -> Callable[..., Path]:
    """
    Factory writing a manifest into a project directory.

    Usage:
        path = write_manifest({"name": "p", "runtime": "nodejs"})
        path = write_manifest(data, directory="other", file_name="Project.json")
    """

    def _write(
        document: Any,
        directory: str = "project",
        file_name: str = "Project.yaml",
    ) -> Path:
        project_dir = tmp_path / directory
        project_dir.mkdir(parents=True, exist_ok=True)
        path = project_dir / file_name
        if file_name.endswith(".json"):
            path.write_text(json.dumps(document), encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(document), encoding="utf-8")
        return path

    return _write
