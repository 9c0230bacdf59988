"""Instance construction during deserialization."""

from __future__ import annotations

from typing import TypeVar

from schema_json_mapper.path_resolution import JsonValue, resolve_path
from schema_json_mapper.schema_registry import (
    ConstructorPlan,
    DefaultConstruction,
    PathList,
    SchemaRegistry,
    WholeDocument,
)

_T = TypeVar("_T")


def select_constructor_plan(target_type: type, registry: SchemaRegistry) -> ConstructorPlan:
    """Return the plan declared nearest to ``target_type`` in its MRO."""
    return registry.constructor_plan_for(target_type)


def instantiate(target_type: type[_T], document: JsonValue, plan: ConstructorPlan) -> _T:
    """Build a fresh instance; constructor and path errors propagate unchanged."""
    if isinstance(plan, WholeDocument):
        return target_type(document)  # type: ignore[call-arg]
    if isinstance(plan, PathList):
        arguments = [resolve_path(path, document) for path in plan.paths]
        return target_type(*arguments)
    if isinstance(plan, DefaultConstruction):
        return target_type()
    raise TypeError(f"Unknown constructor plan: {plan!r}")
