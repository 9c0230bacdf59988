"""Register configured type definitions into a schema registry."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from typing import Any

from schema_json_mapper.mapping_errors import SchemaDefinitionError
from schema_json_mapper.schema_registry import (
    SchemaRegistry,
    TypeTag,
    array_of,
    as_type_tag,
    class_of,
    object_of,
    prop,
)

from .loader import ConfigurationError
from .runtime_settings import MapperConfiguration, TypeDefinition

_LOGGER = logging.getLogger(__name__)


def register_configured_types(
    configuration: MapperConfiguration, registry: SchemaRegistry
) -> tuple[type, ...]:
    """Import every configured class and register its schema; return the classes."""
    registered: list[type] = []
    for definition in configuration.types:
        target_type = import_type(definition.type_name)
        _register_definition(target_type, definition, registry)
        registered.append(target_type)
    _LOGGER.debug("Registered %d configured types from %s", len(registered), configuration.path)
    return tuple(registered)


def import_type(type_name: str) -> type:
    """Import ``package.module.ClassName`` (nested classes allowed)."""
    parts = type_name.split(".")
    for split_at in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split_at])
        try:
            target: Any = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            if exc.name is not None and module_name.startswith(exc.name):
                continue
            raise ConfigurationError(f"Failed to import {module_name}: {exc}") from exc
        for attribute in parts[split_at:]:
            target = getattr(target, attribute, None)
            if target is None:
                break
        if isinstance(target, type):
            return target
        raise ConfigurationError(f"'{type_name}' does not name a class.")
    raise ConfigurationError(f"Cannot import module for '{type_name}'.")


def _register_definition(
    target_type: type, definition: TypeDefinition, registry: SchemaRegistry
) -> None:
    properties = [
        prop(item.name, _build_type_tag(item.type_spec), item.required)
        for item in definition.properties
    ]
    try:
        registry.register(target_type, properties, constructor=definition.constructor)
    except SchemaDefinitionError as exc:
        raise ConfigurationError(f"types.{definition.type_name}: {exc}") from exc


def _build_type_tag(type_spec: Any) -> TypeTag:
    if isinstance(type_spec, str):
        return as_type_tag(type_spec)
    if not isinstance(type_spec, Mapping):
        raise ConfigurationError(f"Unsupported type specification: {type_spec!r}")
    if "array" in type_spec:
        return array_of(_build_type_tag(type_spec["array"]))
    if "object" in type_spec:
        return object_of(
            {name: _build_type_tag(child) for name, child in type_spec["object"].items()}
        )
    return class_of(import_type(type_spec["class"]))
