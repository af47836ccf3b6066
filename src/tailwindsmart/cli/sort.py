"""CLI command: tailwind-smart sort -- print classes in canonical order."""

from __future__ import annotations

import click

from tailwindsmart.cache import ClassCache
from tailwindsmart.cli._input import read_classes
from tailwindsmart.sorting import sort_classes


@click.command()
@click.argument("classes", nargs=-1, required=True)
@click.pass_obj
def sort(config, classes: tuple[str, ...]) -> None:
    """Sort Tailwind classes and print them on one line.

    Pass the classes as arguments, or a single ``-`` to read stdin (each
    line is sorted separately).
    """
    cache = ClassCache.from_config(config) if config else ClassCache()
    source = read_classes(classes)
    for line in source.splitlines() or [""]:
        click.echo(sort_classes(line, cache=cache))
