from objkit.selector import facade as css
from objkit.selector.builder import SelectorBuilder
from objkit.selector.errors import (
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
)
from objkit.selector.kinds import CAPPED_KINDS, COMBINATORS, FragmentKind

__all__ = [
    "css",
    "SelectorBuilder",
    "FragmentKind",
    "CAPPED_KINDS",
    "COMBINATORS",
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "InvalidCombinatorError",
]
