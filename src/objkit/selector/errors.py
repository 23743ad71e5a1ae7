"""Selector builder error types."""

from __future__ import annotations

from objkit.selector.kinds import FragmentKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector builder failures."""


class DuplicateFragmentError(SelectorError):
    """A capped fragment kind (element, id, pseudo-element) was appended twice."""

    def __init__(self, kind: FragmentKind) -> None:
        self.kind = kind
        super().__init__(DUPLICATE_MESSAGE)


class OrderViolationError(SelectorError):
    """A fragment was appended after a fragment of a later kind."""

    def __init__(self, kind: FragmentKind, last: FragmentKind) -> None:
        self.kind = kind
        self.last = last
        super().__init__(ORDER_MESSAGE)


class InvalidCombinatorError(SelectorError, ValueError):
    """The combinator token is not one of ' ', '+', '~', '>'."""

    def __init__(self, combinator: str) -> None:
        self.combinator = combinator
        super().__init__(
            f"Invalid combinator {combinator!r}: expected one of ' ', '+', '~', '>'"
        )
