"""Schema registry exports."""

from .property_models import (
    ConstructorPlan,
    DefaultConstruction,
    PathList,
    PropertyDescriptor,
    WholeDocument,
    as_constructor_plan,
    prop,
)
from .registry import SchemaRegistry, default_registry, json_type
from .type_tags import (
    BOOLEAN,
    DATE_TIME,
    FLOAT,
    INT,
    STRING,
    ArrayType,
    ClassType,
    ObjectType,
    PrimitiveType,
    TypeTag,
    array_of,
    as_type_tag,
    class_of,
    describe_type_tag,
    object_of,
)

__all__ = [
    "BOOLEAN",
    "DATE_TIME",
    "FLOAT",
    "INT",
    "STRING",
    "ArrayType",
    "ClassType",
    "ObjectType",
    "PrimitiveType",
    "TypeTag",
    "array_of",
    "as_type_tag",
    "class_of",
    "describe_type_tag",
    "object_of",
    "ConstructorPlan",
    "DefaultConstruction",
    "PathList",
    "PropertyDescriptor",
    "WholeDocument",
    "as_constructor_plan",
    "prop",
    "SchemaRegistry",
    "default_registry",
    "json_type",
]
