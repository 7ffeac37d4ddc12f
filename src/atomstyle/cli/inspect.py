"""CLI command: atomstyle inspect -- show the atomic entries of a class."""

from __future__ import annotations

import sys
import warnings

import click

from atomstyle.cli.common import compile_source, configure_logging, verbose_option
from atomstyle.model.entry import AtomicClassEntry, ConditionalBundle


def _describe(key: str, condition: str | None, entry: AtomicClassEntry) -> str:
    parts = [f"  {key}"]
    if condition:
        parts.append(f"condition={condition}")
    if entry.is_null:
        parts.append("unset")
        return "  ".join(parts)
    parts.append(f"class={entry.class_name}")
    parts.append(f"priority={entry.priority}")
    if entry.var_name:
        parts.append(f"var={entry.var_name}")
    parts.append(f"rule={entry.ltr_css}")
    if entry.rtl_css:
        parts.append(f"rtl={entry.rtl_css}")
    return "  ".join(parts)


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.argument("name")
@verbose_option
def inspect(source: str, name: str, verbose: bool) -> None:
    """Compile SOURCE and list the atomic entries of class NAME."""
    configure_logging(verbose)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        styles = compile_source(source)

    if name in styles.classes:
        definition = styles.classes[name]
        click.echo(f"Class: {name}")
        entries = definition.entries
    elif name in styles.dynamic:
        dynamic = styles.dynamic[name]
        click.echo(f"Dynamic class: {name}  params={', '.join(dynamic.params)}")
        entries = dict(dynamic.entries)
    else:
        known = sorted([*styles.classes, *styles.dynamic])
        click.echo(f"Unknown class '{name}'. Defined: {', '.join(known) or '(none)'}", err=True)
        sys.exit(1)

    for key, value in entries.items():
        if isinstance(value, ConditionalBundle):
            for condition, entry in value.items():
                click.echo(_describe(key, condition, entry))
        else:
            click.echo(_describe(key, None, value))
