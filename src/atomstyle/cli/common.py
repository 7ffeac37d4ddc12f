"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import sys
from typing import Any

import click

from atomstyle.errors import CompileError
from atomstyle.loader import load_file
from atomstyle.stylesheet import CompiledStyles

verbose_option = click.option("-v", "--verbose", is_flag=True, help="Log compile progress to stderr")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def compile_source(source: str, overrides: dict[str, Any] | None = None) -> CompiledStyles:
    """Load and compile *source*, exiting with status 1 on any compile error."""
    try:
        return load_file(source, overrides=overrides).compile()
    except CompileError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
