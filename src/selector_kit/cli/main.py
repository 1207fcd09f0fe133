"""selector-kit CLI entry point: Click group with subcommands."""

import logging
import sys

import click

from selector_kit import __version__
from selector_kit.config import ConfigError, SelectorKitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selector-kit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """selector-kit - build CSS selectors and play with shape objects."""
    try:
        config = SelectorKitConfig.from_env()
    except ConfigError as exc:
        click.echo(f"Error: invalid configuration: {exc}", err=True)
        sys.exit(1)
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Import and register subcommands
from selector_kit.cli.build import build  # noqa: E402
from selector_kit.cli.shapes import area, from_json_cmd, to_json_cmd  # noqa: E402

cli.add_command(build)
cli.add_command(area)
cli.add_command(to_json_cmd)
cli.add_command(from_json_cmd)
