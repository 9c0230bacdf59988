"""Property descriptors and constructor plans attached to registered types."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from schema_json_mapper.mapping_errors import SchemaDefinitionError
from schema_json_mapper.path_resolution import parse_path

from .type_tags import TypeTag, as_type_tag


@dataclass(frozen=True)
class PropertyDescriptor:
    """One schema entry: property name, type tag and required flag."""

    name: str
    type: TypeTag
    required: bool = False


@dataclass(frozen=True)
class DefaultConstruction:
    """Instantiate without arguments and assign properties afterwards."""


@dataclass(frozen=True)
class WholeDocument:
    """Pass the entire incoming JSON value as the single constructor argument."""


@dataclass(frozen=True)
class PathList:
    """Pass one positional argument per path expression, in declared order."""

    paths: tuple[str, ...]

    def __post_init__(self) -> None:
        for path in self.paths:
            parse_path(path)


ConstructorPlan: TypeAlias = DefaultConstruction | WholeDocument | PathList


def prop(name: str, type_tag: Any, required: bool = False) -> PropertyDescriptor:
    """Build a descriptor, accepting type tag shorthand."""
    if not isinstance(name, str) or not name:
        raise SchemaDefinitionError("Property name must be a non-empty string.")
    return PropertyDescriptor(name=name, type=as_type_tag(type_tag), required=bool(required))


def as_property_descriptor(value: Any) -> PropertyDescriptor:
    if isinstance(value, PropertyDescriptor):
        return value
    if isinstance(value, Sequence) and not isinstance(value, str) and 2 <= len(value) <= 3:
        return prop(*value)
    raise SchemaDefinitionError(f"Cannot interpret {value!r} as a property descriptor.")


def as_constructor_plan(value: Any) -> ConstructorPlan | None:
    """Normalize ``None``, ``True``/``"document"``, a plan, or a list of paths."""
    if value is None:
        return None
    if isinstance(value, DefaultConstruction | WholeDocument | PathList):
        return value
    if value is True or value == "document":
        return WholeDocument()
    if isinstance(value, Sequence) and not isinstance(value, str):
        return PathList(paths=tuple(value))
    raise SchemaDefinitionError(f"Cannot interpret {value!r} as a constructor plan.")
