"""Stateless entry points for building selectors.

Each function starts a fresh :class:`SelectorBuilder`; chained calls then
continue on the returned builder::

    from objkit.selector import css

    css.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

from objkit.selector.builder import SelectorBuilder

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def element(tag: str) -> SelectorBuilder:
    return SelectorBuilder().element(tag)


def id(name: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().id(name)


def class_(name: str) -> SelectorBuilder:
    return SelectorBuilder().class_(name)


def attr(spec: str) -> SelectorBuilder:
    return SelectorBuilder().attr(spec)


def pseudo_class(name: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(name)


def pseudo_element(name: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(name)


def combine(
    first: SelectorBuilder, combinator: str, second: SelectorBuilder
) -> SelectorBuilder:
    """Join *first* and *second* with *combinator* into a new selector."""
    return SelectorBuilder.combine(first, combinator, second)
