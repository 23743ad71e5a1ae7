"""CLI commands: objkit rectangle / objkit decode -- records and the JSON codec."""

from __future__ import annotations

import sys

import click

from objkit.codec import (
    ConstructionError,
    ParseError,
    SerializationError,
    default_registry,
    deserialize,
    serialize,
)
from objkit.config import ObjkitConfig
from objkit.model import create_rectangle


def _number(ctx: click.Context, param: click.Parameter, value: str) -> int | float:
    """Parse *value* as an int when possible, else as a float."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a number") from None


@click.command()
@click.argument("width", callback=_number)
@click.argument("height", callback=_number)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the record as JSON")
@click.pass_obj
def rectangle(config: ObjkitConfig, width: int | float, height: int | float, as_json: bool) -> None:
    """Build a rectangle and print its area (or the record as JSON)."""
    rect = create_rectangle(width, height)
    if as_json:
        click.echo(serialize(rect, sort_keys=config.sort_keys, indent=config.indent))
    else:
        click.echo(rect.area())


@click.command()
@click.argument("shape")
@click.argument("text")
@click.pass_obj
def decode(config: ObjkitConfig, shape: str, text: str) -> None:
    """Rebuild a registered SHAPE from JSON TEXT and print it back as JSON.

    Field values are applied positionally in the order they appear in TEXT.
    """
    try:
        factory = default_registry.get(shape)
    except KeyError as exc:
        known = ", ".join(default_registry.names())
        click.echo(f"Error: {exc.args[0]} (known shapes: {known})", err=True)
        sys.exit(1)

    try:
        instance = deserialize(factory, text)
        output = serialize(instance, sort_keys=config.sort_keys, indent=config.indent)
    except (ParseError, ConstructionError, SerializationError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(output)
