"""objkit: rectangle records, a JSON codec, and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objkit.codec import (
    ConstructionError,
    ParseError,
    SerializationError,
    ShapeRegistry,
    default_registry,
    deserialize,
    serialize,
)
from objkit.config import ConfigError, ObjkitConfig
from objkit.model import Rectangle, create_rectangle
from objkit.selector import (
    DuplicateFragmentError,
    FragmentKind,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorBuilder,
    SelectorError,
    css,
)

__all__ = [
    "__version__",
    "ObjkitConfig",
    "ConfigError",
    # model
    "Rectangle",
    "create_rectangle",
    # codec
    "serialize",
    "deserialize",
    "ShapeRegistry",
    "default_registry",
    "ParseError",
    "ConstructionError",
    "SerializationError",
    # selector
    "css",
    "SelectorBuilder",
    "FragmentKind",
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "InvalidCombinatorError",
]
