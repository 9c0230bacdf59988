"""Registry mapping classes to their property schema and constructor plan."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from schema_json_mapper.mapping_errors import SchemaDefinitionError

from .property_models import (
    ConstructorPlan,
    DefaultConstruction,
    PropertyDescriptor,
    as_constructor_plan,
    as_property_descriptor,
)

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


@dataclass(frozen=True)
class _TypeRegistration:
    """Own (non-inherited) declarations of one registered class."""

    properties: tuple[PropertyDescriptor, ...]
    constructor: ConstructorPlan | None


class SchemaRegistry:
    """Inheritance-aware store of property schemas.

    The resolved schema of a class concatenates the own properties of every
    registered class in its MRO, base classes first. Constructor plans are
    inherited from the nearest class that declares one.
    """

    def __init__(self) -> None:
        self._registrations: dict[type, _TypeRegistration] = {}
        self._resolved: dict[type, tuple[PropertyDescriptor, ...]] = {}
        self._lock = threading.Lock()

    def register(
        self,
        target_type: type,
        properties: Iterable[Any],
        *,
        constructor: Any = None,
    ) -> None:
        if not isinstance(target_type, type):
            raise SchemaDefinitionError(f"Only classes can be registered, got {target_type!r}.")
        descriptors = tuple(as_property_descriptor(item) for item in properties)
        _ensure_unique_names(target_type, descriptors)
        registration = _TypeRegistration(
            properties=descriptors,
            constructor=as_constructor_plan(constructor),
        )
        with self._lock:
            self._registrations[target_type] = registration
            self._resolved.clear()
        _LOGGER.debug(
            "Registered %s with properties %s",
            target_type.__qualname__,
            [descriptor.name for descriptor in descriptors],
        )

    def json_type(
        self, *properties: Any, constructor: Any = None
    ) -> Callable[[type[_T]], type[_T]]:
        """Class decorator form of :meth:`register`."""

        def decorate(target_type: type[_T]) -> type[_T]:
            self.register(target_type, properties, constructor=constructor)
            return target_type

        return decorate

    def has_schema(self, target_type: type) -> bool:
        return any(candidate in self._registrations for candidate in target_type.__mro__)

    def schema_for(self, target_type: type) -> tuple[PropertyDescriptor, ...]:
        cached = self._resolved.get(target_type)
        if cached is not None:
            return cached
        with self._lock:
            descriptors: list[PropertyDescriptor] = []
            for candidate in reversed(target_type.__mro__):
                registration = self._registrations.get(candidate)
                if registration is not None:
                    descriptors.extend(registration.properties)
            resolved = tuple(descriptors)
            self._resolved[target_type] = resolved
        return resolved

    def constructor_plan_for(self, target_type: type) -> ConstructorPlan:
        for candidate in target_type.__mro__:
            registration = self._registrations.get(candidate)
            if registration is not None and registration.constructor is not None:
                return registration.constructor
        return DefaultConstruction()

    def registered_types(self) -> tuple[type, ...]:
        return tuple(self._registrations)


def _ensure_unique_names(target_type: type, descriptors: tuple[PropertyDescriptor, ...]) -> None:
    seen: set[str] = set()
    for descriptor in descriptors:
        if descriptor.name in seen:
            raise SchemaDefinitionError(
                f"Duplicate property '{descriptor.name}' in schema of {target_type.__qualname__}."
            )
        seen.add(descriptor.name)


default_registry = SchemaRegistry()
json_type = default_registry.json_type
