"""tailwind-smart CLI entry point: Click group with subcommands."""

import logging
import sys

import click

from tailwindsmart import __version__
from tailwindsmart.config import TailwindSmartConfig
from tailwindsmart.errors import ConfigError


@click.group()
@click.version_option(version=__version__, prog_name="tailwind-smart")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (defaults to TAILWINDSMART_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """tailwind-smart - sort, inspect and lint Tailwind CSS class strings."""
    try:
        config = TailwindSmartConfig.from_env()
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    level = log_level.upper() if log_level else config.log_level.upper()
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from tailwindsmart.cli.sort import sort  # noqa: E402
from tailwindsmart.cli.check import check  # noqa: E402
from tailwindsmart.cli.inspect import inspect  # noqa: E402

cli.add_command(sort)
cli.add_command(check)
cli.add_command(inspect)
