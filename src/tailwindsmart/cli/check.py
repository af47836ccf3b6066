"""CLI command: tailwind-smart check -- lint a class string."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailwindsmart.cache import ClassCache
from tailwindsmart.cli._input import read_classes
from tailwindsmart.model.diagnostic import Severity
from tailwindsmart.validation import lint


def _load_universe(path: str) -> frozenset[str]:
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return frozenset(line.strip() for line in lines if line.strip())


@click.command()
@click.argument("classes", nargs=-1, required=True)
@click.option(
    "--classes-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Newline-separated list of valid classes; enables unknown-class checks.",
)
@click.pass_obj
def check(config, classes: tuple[str, ...], classes_file: str | None) -> None:
    """Lint Tailwind classes.

    Prints diagnostics (errors, warnings) and exits with code 0 if no errors
    are found, or code 1 if there are errors.
    """
    universe = _load_universe(classes_file) if classes_file else None
    cache = ClassCache.from_config(config) if config else ClassCache()
    diagnostics = lint(read_classes(classes), universe=universe, cache=cache, config=config)

    if not diagnostics:
        click.echo("OK: no problems found")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]

    for diag in diagnostics:
        click.echo(str(diag))
        if diag.fix:
            click.echo(f"  fix: {diag.fix}")

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    if errors:
        sys.exit(1)
    sys.exit(0)
