"""
Show command for CLI.

Decodes a project manifest and prints it back out.

This module is part of PROJECTSPACE.
"""

from pathlib import Path

import click

from ...exceptions import ManifestError
from ..utils import format_project_output, load_manifest_file


@click.command()
@click.argument("manifest_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "format_type",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Output format",
)
def show(manifest_file: Path, format_type: str) -> None:
    """
    Show a decoded project manifest.

    MANIFEST_FILE: Path to the manifest to show
    """
    try:
        project = load_manifest_file(manifest_file)
    except ManifestError as e:
        raise click.ClickException(str(e)) from e

    click.echo(format_project_output(project.to_document(), format_type))
