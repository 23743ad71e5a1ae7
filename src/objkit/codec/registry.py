"""Shape registry: named constructors for deserialization."""

from __future__ import annotations

import logging
from typing import Any, Callable

from objkit.codec.json_codec import deserialize

logger = logging.getLogger(__name__)

Shape = Callable[..., Any]


class ShapeRegistry:
    """Maps shape names to constructors that accept positional field values.

    Insertion-order stable. Names are unique: registering a name twice raises.
    """

    def __init__(self) -> None:
        self._shapes: dict[str, Shape] = {}

    def register(self, name: str, shape: Shape | None = None) -> Any:
        """Register *shape* under *name*.

        Without *shape*, returns a decorator that registers the decorated
        class or function and hands it back unchanged.
        """
        if shape is None:
            def decorator(func: Shape) -> Shape:
                self.register(name, func)
                return func

            return decorator

        if name in self._shapes:
            raise ValueError(f"Shape {name!r} is already registered")
        self._shapes[name] = shape
        logger.debug("Registered shape %r", name)
        return shape

    def get(self, name: str) -> Shape:
        """Look up a shape by name; raises KeyError if unknown."""
        try:
            return self._shapes[name]
        except KeyError:
            raise KeyError(f"Unknown shape {name!r}") from None

    def names(self) -> list[str]:
        """Return all registered shape names in registration order."""
        return list(self._shapes.keys())

    def deserialize(self, name: str, text: str) -> Any:
        """Build the shape registered as *name* from JSON *text*."""
        return deserialize(self.get(name), text)

    def __contains__(self, name: str) -> bool:
        return name in self._shapes


def create_default_registry() -> ShapeRegistry:
    """Create a ShapeRegistry with the built-in shapes registered."""
    from objkit.model.rectangle import create_rectangle

    registry = ShapeRegistry()
    registry.register("rectangle", create_rectangle)
    return registry


default_registry = create_default_registry()
