"""objkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
from dataclasses import replace

import click

from objkit import __version__
from objkit.config import ConfigError, ObjkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.option("--sort-keys", is_flag=True, default=False, help="Sort object keys in JSON output")
@click.option("--indent", type=int, default=None, help="Indent JSON output by N spaces")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, sort_keys: bool, indent: int | None) -> None:
    """objkit - rectangle records, JSON codec and CSS selector builder."""
    try:
        config = ObjkitConfig.from_env()
    except ConfigError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc
    if sort_keys:
        config = replace(config, sort_keys=True)
    if indent is not None:
        config = replace(config, indent=indent)
    if verbose:
        config = replace(config, log_level="DEBUG")

    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from objkit.cli.rectangle import rectangle, decode  # noqa: E402
from objkit.cli.selector import selector, combine  # noqa: E402

cli.add_command(rectangle)
cli.add_command(decode)
cli.add_command(selector)
cli.add_command(combine)
