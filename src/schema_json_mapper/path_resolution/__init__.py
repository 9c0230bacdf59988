"""Path expression exports."""

from .json_values import JsonObject, JsonPrimitive, JsonValue
from .path_expressions import PathSegment, parse_path, resolve_path

__all__ = [
    "JsonObject",
    "JsonPrimitive",
    "JsonValue",
    "PathSegment",
    "parse_path",
    "resolve_path",
]
