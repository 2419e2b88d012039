"""objkit CLI entry point: Click group with subcommands."""

import logging

import click

from objkit import __version__
from objkit.config import ObjkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option(
    "--log-level",
    default=ObjkitConfig.log_level,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for library messages.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """objkit - rectangles, JSON capability bridge and CSS selector builder."""
    config = ObjkitConfig(log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = config


# Import and register subcommands
from objkit.cli.jsontext import json_cmd  # noqa: E402
from objkit.cli.rect import rect  # noqa: E402
from objkit.cli.selector import selector  # noqa: E402

cli.add_command(rect)
cli.add_command(selector)
cli.add_command(json_cmd)
