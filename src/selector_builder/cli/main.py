"""Selector Builder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from selector_builder import __version__
from selector_builder.config import BuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option("--verbose", "-v", is_flag=True, help="Log every builder step")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Selector Builder - assemble CSS selectors part by part."""
    try:
        config = BuilderConfig.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig does nothing once the root logger has handlers
    logging.getLogger("selector_builder").setLevel(level)
    ctx.obj = config


# Import and register subcommands
from selector_builder.cli.build import build  # noqa: E402
from selector_builder.cli.parts import parts  # noqa: E402

cli.add_command(build)
cli.add_command(parts)
