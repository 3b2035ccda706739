"""Plumet CLI entry point: Click group with subcommands."""

import click

from plumet import __version__


@click.group()
@click.version_option(version=__version__, prog_name="plumet")
def cli() -> None:
    """Plumet - compile nested Python style trees to static CSS."""


# Import and register subcommands
from plumet.cli.build import build  # noqa: E402

cli.add_command(build)
