"""CLI commands: objkit selector / objkit combine -- build CSS selectors."""

from __future__ import annotations

import sys

import click

from objkit.selector import SelectorBuilder, SelectorError


@click.command()
@click.option("--element", "tag", default=None, help="Element (type) selector")
@click.option("--id", "id_", default=None, help="Id selector")
@click.option("--class", "classes", multiple=True, help="Class selector (repeatable)")
@click.option("--attr", "attrs", multiple=True, help="Attribute selector body (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element")
def selector(
    tag: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build one compound selector and print it.

    Parts are emitted in canonical order regardless of option order:
    element, id, class, attribute, pseudo-class, pseudo-element.
    """
    if not any((tag, id_, classes, attrs, pseudo_classes, pseudo_element)):
        raise click.UsageError("At least one selector part is required.")

    builder = SelectorBuilder()
    if tag:
        builder.element(tag)
    if id_:
        builder.id(id_)
    for name in classes:
        builder.class_(name)
    for spec in attrs:
        builder.attr(spec)
    for name in pseudo_classes:
        builder.pseudo_class(name)
    if pseudo_element:
        builder.pseudo_element(pseudo_element)

    click.echo(builder.stringify())


@click.command()
@click.argument("first")
@click.argument("combinator")
@click.argument("second")
def combine(first: str, combinator: str, second: str) -> None:
    """Join two selectors FIRST and SECOND with COMBINATOR (' ', '+', '~', '>')."""
    try:
        result = SelectorBuilder.combine(
            SelectorBuilder(first), combinator, SelectorBuilder(second)
        )
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(result.stringify())
