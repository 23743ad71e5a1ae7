"""Codec error types."""

from __future__ import annotations

import json
from typing import Any


class ParseError(json.JSONDecodeError):
    """Raised when JSON text cannot be parsed.

    Subclasses :class:`json.JSONDecodeError` so callers that already catch
    the standard decoder error keep working.
    """

    @property
    def line(self) -> int:
        return self.lineno

    @property
    def column(self) -> int:
        return self.colno


class ConstructionError(TypeError):
    """Raised when a shape cannot be built from the decoded positional values."""

    def __init__(self, message: str, shape: Any = None, args: tuple[Any, ...] = ()) -> None:
        self.shape = shape
        self.arguments = args
        super().__init__(message)


class SerializationError(ValueError):
    """Raised when a value cannot be encoded (cycles, unsupported types)."""
