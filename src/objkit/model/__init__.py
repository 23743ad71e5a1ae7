"""objkit model layer -- public type re-exports."""

from objkit.model.rectangle import Rectangle, create_rectangle

__all__ = [
    "Rectangle",
    "create_rectangle",
]
