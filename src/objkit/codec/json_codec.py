"""JSON serialization helpers.

``serialize`` turns records into JSON text; ``deserialize`` rebuilds an
instance of a caller-supplied shape from that text by passing the decoded
field values positionally, in document order.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Callable, TypeVar

from objkit.codec.errors import ConstructionError, ParseError, SerializationError

__all__ = ["serialize", "deserialize"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_default(obj: Any) -> Any:
    """Fallback encoder for values ``json`` does not handle natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj) if f.init}
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any, *, sort_keys: bool = False, indent: int | None = None) -> str:
    """Return the JSON text for *value*.

    Dataclass instances become objects of their init fields in declaration
    order; objects exposing ``to_dict()`` are encoded from its result.

    Raises:
        SerializationError: if *value* contains a cycle or an unencodable value.
    """
    try:
        return json.dumps(
            value,
            default=_encode_default,
            sort_keys=sort_keys,
            indent=indent,
            check_circular=True,
        )
    except (TypeError, ValueError) as exc:
        logger.debug("Serialization of %s failed: %s", type(value).__name__, exc)
        raise SerializationError(str(exc)) from exc


def _positional_values(data: Any) -> list[Any]:
    if isinstance(data, dict):
        return list(data.values())
    if isinstance(data, list):
        return data
    raise ConstructionError(
        f"Expected a JSON object or array, got {type(data).__name__}"
    )


def deserialize(shape: Callable[..., T], text: str) -> T:
    """Build an instance of *shape* from JSON *text*.

    The decoded object's values are passed to *shape* positionally in the
    order they appear in *text*; field names are ignored. The constructor's
    parameter order must therefore match the document's field order.

    Raises:
        ParseError: if *text* is not valid JSON.
        ConstructionError: if the payload is a scalar, or *shape* rejects the
            arguments.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Invalid JSON for %r: %s", shape, exc)
        raise ParseError(exc.msg, exc.doc, exc.pos) from exc

    args = tuple(_positional_values(data))
    try:
        return shape(*args)
    except (TypeError, ValueError) as exc:
        name = getattr(shape, "__name__", repr(shape))
        logger.debug("Construction of %s with %r failed: %s", name, args, exc)
        raise ConstructionError(
            f"Cannot construct {name} from {len(args)} value(s): {exc}",
            shape=shape,
            args=args,
        ) from exc
