from objkit.codec.errors import ConstructionError, ParseError, SerializationError
from objkit.codec.json_codec import deserialize, serialize
from objkit.codec.registry import ShapeRegistry, create_default_registry, default_registry

__all__ = [
    "serialize",
    "deserialize",
    "ShapeRegistry",
    "create_default_registry",
    "default_registry",
    "ParseError",
    "ConstructionError",
    "SerializationError",
]
