"""Per-call traversal state."""

from __future__ import annotations

from dataclasses import dataclass, field

from schema_json_mapper.mapping_errors import CircularReferenceError, DepthExceededError

DEFAULT_MAX_LEVELS = 256


@dataclass
class TraversalFrame:
    """Visited instances and depth limit for one top-level codec call.

    Instances are only ever added, so sharing one object between two sibling
    fields is reported as a cycle as well. The frame holds a reference to each
    visited instance, so an identity cannot be reused by a later object while
    the call is running.
    """

    max_levels: int
    visited: dict[int, object] = field(default_factory=dict)

    def enter_instance(self, instance: object) -> None:
        identity = id(instance)
        if identity in self.visited:
            raise CircularReferenceError(
                f"Circular reference detected: {type(instance).__qualname__} instance"
                " visited twice."
            )
        self.visited[identity] = instance

    def descend(self, depth: int, direction: str) -> int:
        """Return the child level, failing once it reaches ``max_levels``."""
        child_depth = depth + 1
        if child_depth >= self.max_levels:
            raise DepthExceededError(
                f"Max levels ({self.max_levels}) reached for {direction} at level {child_depth}."
            )
        return child_depth

    def check_read_level(self, depth: int) -> None:
        """Fail when a value read at ``depth`` has no level left below it."""
        if depth + 1 >= self.max_levels:
            raise DepthExceededError(
                f"Max levels ({self.max_levels}) reached for deserialization"
                f" at level {depth + 1}."
            )
