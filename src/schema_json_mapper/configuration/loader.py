"""Configuration loader service."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_json_mapper.mapping_errors import PathSyntaxError
from schema_json_mapper.path_resolution import parse_path
from schema_json_mapper.schema_registry.type_tags import PRIMITIVE_TYPES

from .runtime_settings import (
    DEFAULT_MAX_LEVELS,
    CodecSettings,
    MapperConfiguration,
    PropertySettings,
    TypeDefinition,
)

_LOGGER = logging.getLogger(__name__)

_TYPE_NAME_PATTERN = re.compile(r"^[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)+$")
_COMPOSITE_KINDS = ("array", "object", "class")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> MapperConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    codec = _parse_codec_section(parsed.get("codec"))
    types = _parse_types_section(parsed.get("types"))
    _LOGGER.debug("Loaded configuration %s with %d type definitions", path, len(types))

    return MapperConfiguration(path=path, codec=codec, types=types)


def _parse_codec_section(value: Any) -> CodecSettings:
    if value is None:
        return CodecSettings()
    section = _require_mapping(value, "codec")
    max_levels = _require_positive_int(
        section.get("max_levels", DEFAULT_MAX_LEVELS), "codec.max_levels"
    )
    return CodecSettings(max_levels=max_levels)


def _parse_types_section(value: Any) -> tuple[TypeDefinition, ...]:
    if value is None:
        return ()
    section = _require_mapping(value, "types")
    definitions = []
    for type_name, definition in section.items():
        if not isinstance(type_name, str) or not _TYPE_NAME_PATTERN.fullmatch(type_name):
            raise ConfigurationError(
                f"types key '{type_name}' must be an importable name like package.module.Class."
            )
        definitions.append(_parse_type_definition(type_name, definition))
    return tuple(definitions)


def _parse_type_definition(type_name: str, value: Any) -> TypeDefinition:
    label = f"types.{type_name}"
    section = _require_mapping(value, label)
    properties_section = section.get("properties") or {}
    if not isinstance(properties_section, Mapping):
        raise ConfigurationError(f"{label}.properties must be a mapping.")
    properties = tuple(
        _parse_property(name, definition, f"{label}.properties.{name}")
        for name, definition in properties_section.items()
    )
    constructor = _parse_constructor(section.get("constructor"), f"{label}.constructor")
    return TypeDefinition(type_name=type_name, properties=properties, constructor=constructor)


def _parse_property(name: Any, value: Any, label: str) -> PropertySettings:
    property_name = _require_non_empty_string(name, label)
    if isinstance(value, Mapping) and "type" in value:
        required = value.get("required", False)
        if not isinstance(required, bool):
            raise ConfigurationError(f"{label}.required must be a boolean.")
        type_spec = _parse_type_spec(value["type"], f"{label}.type")
        return PropertySettings(name=property_name, type_spec=type_spec, required=required)
    return PropertySettings(
        name=property_name, type_spec=_parse_type_spec(value, label), required=False
    )


def _parse_type_spec(value: Any, label: str) -> Any:
    if isinstance(value, str):
        if value not in PRIMITIVE_TYPES:
            raise ConfigurationError(
                f"{label} '{value}' is not one of {', '.join(PRIMITIVE_TYPES)}."
            )
        return value
    section = _require_mapping(value, label)
    kinds = [kind for kind in _COMPOSITE_KINDS if kind in section]
    if len(kinds) != 1 or len(section) != 1:
        raise ConfigurationError(f"{label} must set exactly one of array, object or class.")
    kind = kinds[0]
    if kind == "array":
        return {"array": _parse_type_spec(section["array"], f"{label}.array")}
    if kind == "object":
        inner = _require_mapping(section["object"], f"{label}.object")
        return {
            "object": {
                _require_non_empty_string(key, f"{label}.object"): _parse_type_spec(
                    child, f"{label}.object.{key}"
                )
                for key, child in inner.items()
            }
        }
    class_name = _require_non_empty_string(section["class"], f"{label}.class")
    if not _TYPE_NAME_PATTERN.fullmatch(class_name):
        raise ConfigurationError(f"{label}.class '{class_name}' is not an importable name.")
    return {"class": class_name}


def _parse_constructor(value: Any, label: str) -> str | tuple[str, ...] | None:
    if value is None:
        return None
    if value == "document":
        return "document"
    if isinstance(value, Sequence) and not isinstance(value, str):
        paths = tuple(_require_non_empty_string(item, label) for item in value)
        for path in paths:
            try:
                parse_path(path)
            except PathSyntaxError as exc:
                raise ConfigurationError(f"{label}: {exc}") from exc
        return paths
    raise ConfigurationError(f"{label} must be 'document' or a list of path expressions.")


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
