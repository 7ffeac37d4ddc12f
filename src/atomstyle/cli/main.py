"""atomstyle CLI entry point: Click group with subcommands."""

import click

from atomstyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="atomstyle")
def cli() -> None:
    """atomstyle - compile style definitions into atomic CSS."""


# Import and register subcommands
from atomstyle.cli.build import build  # noqa: E402
from atomstyle.cli.inspect import inspect  # noqa: E402
from atomstyle.cli.merge import merge  # noqa: E402

cli.add_command(build)
cli.add_command(inspect)
cli.add_command(merge)
