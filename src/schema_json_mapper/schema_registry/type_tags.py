"""Type tags describing how a property value is encoded and decoded."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from schema_json_mapper.mapping_errors import SchemaDefinitionError


@dataclass(frozen=True)
class PrimitiveType:
    """Scalar type tag identified by name (``int``, ``float``, ...)."""

    name: str


@dataclass(frozen=True)
class ArrayType:
    """Sequence whose elements all share one type tag."""

    element: TypeTag


@dataclass(frozen=True)
class ObjectType:
    """Plain keyed structure with an ordered inline schema."""

    properties: tuple[tuple[str, TypeTag], ...]

    def items(self) -> Iterator[tuple[str, TypeTag]]:
        return iter(self.properties)


@dataclass(frozen=True)
class ClassType:
    """Nested instance of ``reference`` (or one of its subclasses)."""

    reference: type


TypeTag: TypeAlias = PrimitiveType | ArrayType | ObjectType | ClassType

INT = PrimitiveType("int")
FLOAT = PrimitiveType("float")
STRING = PrimitiveType("string")
BOOLEAN = PrimitiveType("boolean")
DATE_TIME = PrimitiveType("dateTime")

PRIMITIVE_TYPES: Mapping[str, PrimitiveType] = {
    tag.name: tag for tag in (INT, FLOAT, STRING, BOOLEAN, DATE_TIME)
}


def array_of(element: Any) -> ArrayType:
    return ArrayType(element=as_type_tag(element))


def object_of(properties: Mapping[str, Any] | None = None, **named: Any) -> ObjectType:
    merged = dict(properties or {})
    merged.update(named)
    return ObjectType(properties=tuple((name, as_type_tag(tag)) for name, tag in merged.items()))


def class_of(reference: type) -> ClassType:
    if not isinstance(reference, type):
        raise SchemaDefinitionError(f"Class type tag requires a class, got {reference!r}.")
    return ClassType(reference=reference)


def as_type_tag(value: Any) -> TypeTag:
    """Normalize shorthand into a type tag.

    Strings name primitives, mappings describe inline objects and classes
    become class tags. Unknown primitive names are kept as-is so the codec can
    report them when it meets a value of that type.
    """
    if isinstance(value, PrimitiveType | ArrayType | ObjectType | ClassType):
        return value
    if isinstance(value, str):
        return PRIMITIVE_TYPES.get(value, PrimitiveType(value))
    if isinstance(value, Mapping):
        return object_of(value)
    if isinstance(value, type):
        return ClassType(reference=value)
    raise SchemaDefinitionError(f"Cannot interpret {value!r} as a type tag.")


def describe_type_tag(tag: TypeTag) -> str:
    """Short human-readable rendering used by the CLI and error messages."""
    if isinstance(tag, PrimitiveType):
        return tag.name
    if isinstance(tag, ArrayType):
        return f"array<{describe_type_tag(tag.element)}>"
    if isinstance(tag, ObjectType):
        inner = ", ".join(f"{name}: {describe_type_tag(child)}" for name, child in tag.items())
        return f"object{{{inner}}}"
    return f"class<{tag.reference.__qualname__}>"
