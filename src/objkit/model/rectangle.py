"""Rectangle model: an immutable width/height record with a computed area."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


@dataclass(frozen=True)
class Rectangle:
    """A width/height pair whose ``area()`` is computed on each call.

    The area closes over the constructor arguments, so it keeps reporting
    ``width * height`` as constructed even if the exposed fields are forced
    to new values afterwards.

    The closure is stored on the instance, so rectangles cannot be pickled;
    use ``to_dict()`` or :func:`objkit.codec.serialize` to persist one.
    """

    width: float
    height: float
    _area: Callable[[], float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        width, height = self.width, self.height
        object.__setattr__(self, "_area", lambda: width * height)

    def area(self) -> float:
        return self._area()

    def to_dict(self) -> dict[str, float]:
        return {"width": self.width, "height": self.height}


def create_rectangle(width: float, height: float) -> Rectangle:
    """Build a :class:`Rectangle`; no range or type checks are applied."""
    return Rectangle(width, height)
