"""Fluent CSS selector builder with fragment ordering validation.

A compound selector is built from fragments in a fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may repeat

Element, id and pseudo-element may each appear once. Two selectors can be
joined with a combinator (' ', '+', '~', '>') into a complex selector.
"""

from __future__ import annotations

import logging

from objkit.selector.errors import (
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
)
from objkit.selector.kinds import COMBINATORS, FragmentKind

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments and validates them as they arrive.

    Every append method mutates the builder and returns it, so calls chain::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._counts: dict[FragmentKind, int] = {}
        self._kinds: list[FragmentKind] = []

    # --- fragments ------------------------------------------------------------

    def element(self, tag: str) -> SelectorBuilder:
        return self._append(FragmentKind.ELEMENT, tag)

    def id(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.ID, name)

    def class_(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, name)

    def attr(self, spec: str) -> SelectorBuilder:
        """Append ``[spec]``; *spec* is inserted verbatim, operators included."""
        return self._append(FragmentKind.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_ELEMENT, name)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text built so far."""
        return self._text

    @property
    def kinds(self) -> tuple[FragmentKind, ...]:
        """Fragment kinds appended to this builder, in call order."""
        return tuple(self._kinds)

    # --- combination ----------------------------------------------------------

    @classmethod
    def combine(
        cls, first: SelectorBuilder, combinator: str, second: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors into a new complex selector.

        The result reads ``first + " " + combinator + " " + second``, so the
        descendant combinator yields three spaces between the operands.

        Raises:
            InvalidCombinatorError: if *combinator* is not ' ', '+', '~' or '>'.
        """
        if combinator not in COMBINATORS:
            logger.debug("Rejected combinator %r", combinator)
            raise InvalidCombinatorError(combinator)
        return cls(f"{first.stringify()} {combinator} {second.stringify()}")

    # --- validation -----------------------------------------------------------

    def _append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        self._check(kind)
        if kind.capped:
            self._counts[kind] = self._counts.get(kind, 0) + 1
        self._kinds.append(kind)
        self._text += kind.render(value)
        logger.debug("Appended %s fragment %r -> %r", kind.name, value, self._text)
        return self

    def _check(self, kind: FragmentKind) -> None:
        """Raise if appending *kind* would break cardinality or ordering."""
        if kind.capped and self._counts.get(kind, 0) >= 1:
            logger.debug("Duplicate %s fragment in %r", kind.name, self._text)
            raise DuplicateFragmentError(kind)
        if self._kinds and kind < self._kinds[-1]:
            logger.debug(
                "%s fragment after %s in %r", kind.name, self._kinds[-1].name, self._text
            )
            raise OrderViolationError(kind, self._kinds[-1])

    # --- dunder helpers -------------------------------------------------------

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"
