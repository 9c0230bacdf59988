"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    CodecSettings,
    MapperConfiguration,
    PropertySettings,
    TypeDefinition,
)
from .type_registration import import_type, register_configured_types

__all__ = [
    "CodecSettings",
    "MapperConfiguration",
    "PropertySettings",
    "TypeDefinition",
    "ConfigurationError",
    "load_configuration",
    "import_type",
    "register_configured_types",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
