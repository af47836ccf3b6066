"""CLI command: tailwind-smart inspect -- show how each class is understood."""

from __future__ import annotations

import click

from tailwindsmart.cache import ClassCache
from tailwindsmart.cli._input import read_classes
from tailwindsmart.classify import classify
from tailwindsmart.parser import decompose, tokenize
from tailwindsmart.sorting import group_by_category


@click.command()
@click.argument("classes", nargs=-1, required=True)
@click.pass_obj
def inspect(config, classes: tuple[str, ...]) -> None:
    """Show variants, base, category and CSS for each class.

    Ends with the classes grouped by category.
    """
    cache = ClassCache.from_config(config) if config else ClassCache()
    source = read_classes(classes)

    click.echo("Classes:")
    for raw in tokenize(source):
        parts = decompose(raw)
        classification = classify(parts.base, cache=cache)
        fields = [f"  {raw}"]
        if parts.variants:
            fields.append(f"variants={','.join(parts.variants)}")
        fields.append(f"base={parts.base}")
        fields.append(f"category={classification.category.display_name}")
        if classification.css is not None:
            fields.append(f'css="{classification.css.declaration}"')
        if not parts.is_valid:
            fields.append(f"problem={parts.result}")
        click.echo("  ".join(fields))
    click.echo()

    click.echo("Groups:")
    for name, members in group_by_category(source, cache=cache).items():
        click.echo(f"  {name}: {' '.join(members)}")
