"""Schema-driven mapping between Python instances and JSON values."""

from .codec_engine import JsonCodec
from .mapping_errors import (
    CircularReferenceError,
    DepthExceededError,
    MappingError,
    PathLookupError,
    PathSyntaxError,
    PropertyRequiredError,
    SchemaDefinitionError,
    SchemaNotFoundError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from .path_resolution import resolve_path
from .schema_registry import (
    BOOLEAN,
    DATE_TIME,
    FLOAT,
    INT,
    STRING,
    PathList,
    SchemaRegistry,
    WholeDocument,
    array_of,
    class_of,
    default_registry,
    json_type,
    object_of,
    prop,
)

__all__ = [
    "JsonCodec",
    "resolve_path",
    "BOOLEAN",
    "DATE_TIME",
    "FLOAT",
    "INT",
    "STRING",
    "PathList",
    "SchemaRegistry",
    "WholeDocument",
    "array_of",
    "class_of",
    "default_registry",
    "json_type",
    "object_of",
    "prop",
    "MappingError",
    "CircularReferenceError",
    "DepthExceededError",
    "PathLookupError",
    "PathSyntaxError",
    "PropertyRequiredError",
    "SchemaDefinitionError",
    "SchemaNotFoundError",
    "TypeMismatchError",
    "UnsupportedTypeError",
]
