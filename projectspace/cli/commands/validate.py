"""
Validate command for CLI.

Validates a project manifest against the schema.

This module is part of PROJECTSPACE.
"""

import sys
from pathlib import Path

import click

from ...exceptions import ManifestError, ManifestValidationError
from ..utils import load_manifest_file


@click.command()
@click.argument("manifest_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show the paths of all schema violations",
)
def validate(manifest_file: Path, verbose: bool) -> None:
    """
    Validate a Project.yaml or Project.json file.

    MANIFEST_FILE: Path to the manifest to validate

    Examples:
        projectspace validate Project.yaml
        projectspace validate path/to/Project.json --verbose
    """
    try:
        project = load_manifest_file(manifest_file)
    except ManifestError as e:
        click.echo(click.style(f"Manifest '{manifest_file}' is invalid!", fg="red"))
        click.echo(click.style(str(e), fg="red"))
        if verbose and isinstance(e, ManifestValidationError):
            click.echo("Error paths:")
            for path in e.error_paths:
                click.echo(f"  - {path}")
        sys.exit(1)

    click.echo(
        click.style(f"Manifest '{manifest_file}' is valid! (project '{project.name}')", fg="green")
    )
