"""Schema-driven conversion between registered instances and JSON values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from schema_json_mapper.mapping_errors import (
    PropertyRequiredError,
    SchemaNotFoundError,
    TypeMismatchError,
)
from schema_json_mapper.path_resolution import JsonObject, JsonValue
from schema_json_mapper.schema_registry import (
    ArrayType,
    ClassType,
    ObjectType,
    PrimitiveType,
    SchemaRegistry,
    TypeTag,
    default_registry,
)

from .constructor_strategy import instantiate, select_constructor_plan
from .primitive_coercion import decode_primitive, encode_primitive
from .traversal import DEFAULT_MAX_LEVELS, TraversalFrame

if TYPE_CHECKING:
    from schema_json_mapper.configuration.runtime_settings import CodecSettings

_T = TypeVar("_T")


class JsonCodec:
    """Serialize and deserialize instances of registered classes.

    The codec holds no per-call state: each top-level call creates its own
    traversal frame, so one codec may be shared between threads.
    """

    def __init__(
        self,
        registry: SchemaRegistry | None = None,
        *,
        max_levels: int = DEFAULT_MAX_LEVELS,
    ) -> None:
        if isinstance(max_levels, bool) or not isinstance(max_levels, int) or max_levels < 1:
            raise ValueError("max_levels must be a positive integer.")
        self._registry = registry if registry is not None else default_registry
        self._max_levels = max_levels

    @classmethod
    def from_settings(
        cls, settings: CodecSettings, registry: SchemaRegistry | None = None
    ) -> JsonCodec:
        return cls(registry, max_levels=settings.max_levels)

    @property
    def max_levels(self) -> int:
        return self._max_levels

    def serialize(self, instance: object, depth: int | None = None) -> JsonObject:
        """Return the JSON mapping for ``instance``."""
        if not self._registry.has_schema(type(instance)):
            raise SchemaNotFoundError(
                f"No schema registered for {type(instance).__qualname__}."
            )
        frame = TraversalFrame(max_levels=self._max_levels)
        return self._serialize_instance(instance, depth or 0, frame)

    def deserialize(
        self, document: JsonValue, target_type: type[_T], depth: int | None = None
    ) -> _T:
        """Build a ``target_type`` instance from a JSON mapping."""
        if not self._registry.has_schema(target_type):
            raise SchemaNotFoundError(f"No schema registered for {target_type.__qualname__}.")
        frame = TraversalFrame(max_levels=self._max_levels)
        return self._deserialize_instance(document, target_type, depth or 0, frame)

    def _serialize_instance(
        self, instance: object, depth: int, frame: TraversalFrame
    ) -> JsonObject:
        frame.enter_instance(instance)
        serialized: JsonObject = {}
        for descriptor in self._registry.schema_for(type(instance)):
            value = getattr(instance, descriptor.name, None)
            if value is None:
                if descriptor.required:
                    raise PropertyRequiredError(descriptor.name)
                continue
            encoded = self._serialize_value(value, descriptor.type, depth, frame)
            if encoded is not None:
                serialized[descriptor.name] = encoded
        return serialized

    def _serialize_value(
        self, value: Any, tag: TypeTag, depth: int, frame: TraversalFrame
    ) -> JsonValue:
        if value is None:
            return None
        if isinstance(tag, PrimitiveType):
            return encode_primitive(value, tag)
        if isinstance(tag, ArrayType):
            if not _is_sequence(value):
                raise TypeMismatchError(f"Value {value!r} is not an array.")
            child_depth = frame.descend(depth, "serialization")
            return [self._serialize_value(item, tag.element, child_depth, frame) for item in value]
        if isinstance(tag, ObjectType):
            if not isinstance(value, Mapping):
                raise TypeMismatchError(f"Value {value!r} is not an object.")
            child_depth = frame.descend(depth, "serialization")
            serialized: JsonObject = {}
            for name, child_tag in tag.items():
                encoded = self._serialize_value(value.get(name), child_tag, child_depth, frame)
                if encoded is not None:
                    serialized[name] = encoded
            return serialized
        return self._serialize_nested_instance(value, tag, depth, frame)

    def _serialize_nested_instance(
        self, value: Any, tag: ClassType, depth: int, frame: TraversalFrame
    ) -> JsonValue:
        if not isinstance(value, tag.reference):
            raise TypeMismatchError(
                f"Value {value!r} is not of type {tag.reference.__qualname__}."
            )
        if not self._registry.has_schema(type(value)):
            return str(value)
        child_depth = frame.descend(depth, "serialization")
        return self._serialize_instance(value, child_depth, frame)

    def _deserialize_instance(
        self, document: JsonValue, target_type: type[_T], depth: int, frame: TraversalFrame
    ) -> _T:
        plan = select_constructor_plan(target_type, self._registry)
        instance = instantiate(target_type, document, plan)
        if not isinstance(document, Mapping):
            raise TypeMismatchError(
                f"Cannot read {target_type.__qualname__} properties from {document!r}."
            )
        for descriptor in self._registry.schema_for(target_type):
            decoded = self._deserialize_value(
                document.get(descriptor.name), descriptor.type, depth, frame
            )
            if decoded is None:
                if descriptor.required:
                    raise PropertyRequiredError(descriptor.name)
                continue
            setattr(instance, descriptor.name, decoded)
        return instance

    def _deserialize_value(
        self, value: JsonValue, tag: TypeTag, depth: int, frame: TraversalFrame
    ) -> Any:
        # Every declared value counts against the limit, undefined ones included.
        frame.check_read_level(depth)
        if value is None:
            return None
        if isinstance(tag, PrimitiveType):
            return decode_primitive(value, tag)
        if isinstance(tag, ArrayType):
            if not _is_sequence(value):
                raise TypeMismatchError(f"Value {value!r} is not an array.")
            return [self._deserialize_value(item, tag.element, depth + 1, frame) for item in value]
        if isinstance(tag, ObjectType):
            if not isinstance(value, Mapping):
                raise TypeMismatchError(f"Value {value!r} is not an object.")
            structure: dict[str, Any] = {}
            for name, child_tag in tag.items():
                decoded = self._deserialize_value(value.get(name), child_tag, depth + 1, frame)
                if decoded is not None:
                    structure[name] = decoded
            return structure
        if not self._registry.has_schema(tag.reference):
            return tag.reference(value)
        return self._deserialize_instance(value, tag.reference, depth + 1, frame)


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)
