"""CLI command: atomstyle merge -- resolve class refs to a class string."""

from __future__ import annotations

import sys
import warnings

import click

from atomstyle.cli.common import compile_source, configure_logging, verbose_option
from atomstyle.errors import CompileError


def parse_ref(text: str) -> object:
    """``name`` is a static ref; ``name:a,b`` a dynamic ref with arguments."""
    if ":" not in text:
        return text
    name, _, args = text.partition(":")
    return (name, tuple(a.strip() for a in args.split(",")))


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.argument("refs", nargs=-1, required=True)
@verbose_option
def merge(source: str, refs: tuple[str, ...], verbose: bool) -> None:
    """Compile SOURCE and merge REFS left to right, last one winning.

    Use ``name:arg,arg`` to pass arguments to a dynamic class.
    """
    configure_logging(verbose)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        styles = compile_source(source)
    try:
        result = styles.merge([parse_ref(r) for r in refs])
    except CompileError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"class: {result.class_string}")
    if result.inline_style:
        click.echo(f"style: {result.inline_style}")
