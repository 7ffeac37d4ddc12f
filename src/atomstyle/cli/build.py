"""CLI command: atomstyle build -- compile a style document to CSS."""

from __future__ import annotations

import warnings
from pathlib import Path

import click

from atomstyle.cli.common import compile_source, configure_logging, verbose_option
from atomstyle.config import ShorthandBehavior


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Write CSS to this file instead of stdout")
@click.option("--layers/--no-layers", default=None, help="Order rules with @layer blocks")
@click.option("--shorthand", type=click.Choice([b.value for b in ShorthandBehavior]),
              default=None, help="Shorthand/longhand policy")
@verbose_option
def build(
    source: str, output: str | None, layers: bool | None, shorthand: str | None, verbose: bool
) -> None:
    """Compile SOURCE (a JSON style document) into a stylesheet.

    Policy warnings are printed to stderr and never fail the build.
    """
    configure_logging(verbose)
    overrides: dict = {}
    if layers is not None:
        overrides["use_css_layers"] = layers
    if shorthand is not None:
        overrides["shorthand_behavior"] = ShorthandBehavior(shorthand)

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        styles = compile_source(source, overrides)
    for diagnostic in styles.diagnostics:
        click.echo(f"  {diagnostic}", err=True)

    css = styles.css
    if output:
        Path(output).write_text(css + "\n", encoding="utf-8")
        click.echo(f"Wrote {len(styles.rules)} rules to {output}", err=True)
    else:
        click.echo(css)
