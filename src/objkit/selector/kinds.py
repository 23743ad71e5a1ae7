"""Selector fragment kinds and their canonical ordering."""

from __future__ import annotations

from enum import IntEnum


class FragmentKind(IntEnum):
    """Kinds of compound-selector fragments.

    The integer value is the order code: within one compound selector the
    codes of appended fragments must never decrease.
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    def render(self, value: str) -> str:
        """Return *value* wrapped in this kind's CSS syntax."""
        prefix, suffix = _SYNTAX[self]
        return f"{prefix}{value}{suffix}"

    @property
    def capped(self) -> bool:
        """True if this kind may occur at most once per compound selector."""
        return self in CAPPED_KINDS


_SYNTAX: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}

CAPPED_KINDS = frozenset({
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
})

# Descendant, adjacent sibling, general sibling, child.
COMBINATORS = frozenset({" ", "+", "~", ">"})
