"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from schema_json_mapper.codec_engine.traversal import DEFAULT_MAX_LEVELS


@dataclass(frozen=True)
class CodecSettings:
    """Codec engine limits."""

    max_levels: int = DEFAULT_MAX_LEVELS


@dataclass(frozen=True)
class PropertySettings:
    """Configured property with its normalized type specification.

    ``type_spec`` is a primitive name, or a one-key mapping ``{"array": spec}``,
    ``{"object": {name: spec}}`` or ``{"class": "dotted.ClassName"}``.
    """

    name: str
    type_spec: Any
    required: bool


@dataclass(frozen=True)
class TypeDefinition:
    """Schema declaration for one importable class."""

    type_name: str
    properties: tuple[PropertySettings, ...]
    constructor: str | tuple[str, ...] | None


@dataclass(frozen=True)
class MapperConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    codec: CodecSettings
    types: tuple[TypeDefinition, ...]
