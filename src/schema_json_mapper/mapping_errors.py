"""Error taxonomy shared by the path resolver, registry and codec."""

from __future__ import annotations


class MappingError(Exception):
    """Base class for every schema mapping failure."""


class PathSyntaxError(MappingError):
    """Raised for malformed path expressions."""


class PathLookupError(MappingError):
    """Raised when a well-formed path addresses a missing key or index."""


class CircularReferenceError(MappingError):
    """Raised when serialization visits the same object twice."""


class DepthExceededError(MappingError):
    """Raised when nesting goes beyond the configured maximum level."""


class TypeMismatchError(MappingError):
    """Raised when a value does not have the shape its type tag declares."""


class PropertyRequiredError(MappingError):
    """Raised when a required property is undefined."""

    def __init__(self, property_name: str) -> None:
        super().__init__(f"Required property '{property_name}' is not set.")
        self.property_name = property_name


class UnsupportedTypeError(MappingError):
    """Raised for primitive type tags without a defined coercion."""


class SchemaNotFoundError(MappingError):
    """Raised when a type without a registered schema is used as a root."""


class SchemaDefinitionError(MappingError):
    """Raised for invalid schema registrations."""
