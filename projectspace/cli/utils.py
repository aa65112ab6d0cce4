"""
Utility functions for CLI commands.

This module is part of PROJECTSPACE.
"""

import json
from pathlib import Path
from typing import Any

import click
import yaml

from ..core.manifest import load_project
from ..core.project import Project


def load_manifest_file(file_path: Path) -> Project:
    """
    Load and validate a manifest file.

    Args:
        file_path: Path to a Project.yaml / Project.json file

    Returns:
        Validated Project

    Raises:
        click.ClickException: If the file doesn't parse
        ManifestError: If the manifest is invalid
    """
    try:
        return load_project(file_path)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Invalid JSON in manifest file: {e}") from e
    except yaml.YAMLError as e:
        raise click.ClickException(f"Invalid YAML in manifest file: {e}") from e


def format_project_output(document: dict[str, Any], format_type: str) -> str:
    """
    Format a project document for output.

    Args:
        document: Project document
        format_type: Output format ('json', 'yaml')

    Returns:
        Formatted string representation
    """
    if format_type == "yaml":
        return yaml.safe_dump(document, default_flow_style=False, sort_keys=False)
    return json.dumps(document, indent=2, ensure_ascii=False)
