"""
CLI entry point.

This module is part of PROJECTSPACE.
"""

import logging

import click

from .commands import show, validate


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """Inspect and validate project manifests."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)


cli.add_command(validate)
cli.add_command(show)


if __name__ == "__main__":
    cli()
