"""Dotted/bracketed path expressions over JSON values."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from schema_json_mapper.mapping_errors import PathLookupError, PathSyntaxError

from .json_values import JsonValue

_SEGMENT_PATTERN = re.compile(r"^(?P<key>[^\[]*)(?P<indices>(?:\[\d+\])*)$")
_INDEX_PATTERN = re.compile(r"\[(\d+)\]")


@dataclass(frozen=True)
class PathSegment:
    """One dot-separated path segment: an optional key and bracketed indices."""

    key: str | None
    indices: tuple[int, ...]


def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Parse a path expression like ``a.b[0][2].c`` into segments."""
    if not isinstance(path, str) or not path:
        raise PathSyntaxError("Path expression must be a non-empty string.")

    segments: list[PathSegment] = []
    prefix = ""
    for raw_segment in path.split("."):
        if not raw_segment:
            raise PathSyntaxError(f"Empty path segment after '{prefix}' in '{path}'.")
        match = _SEGMENT_PATTERN.fullmatch(raw_segment)
        if match is None:
            raise PathSyntaxError(f"Invalid indices in path segment '{raw_segment}'.")
        key = match.group("key") or None
        indices = tuple(int(index) for index in _INDEX_PATTERN.findall(match.group("indices")))
        if key is None and not indices:
            raise PathSyntaxError(f"Invalid path segment '{raw_segment}'.")
        segments.append(PathSegment(key=key, indices=indices))
        prefix = raw_segment if not prefix else f"{prefix}.{raw_segment}"
    return tuple(segments)


def resolve_path(path: str, root: JsonValue) -> JsonValue:
    """Return the value addressed by ``path`` inside ``root``."""
    segments = parse_path(path)
    return _resolve_segments(segments, root, prefix="")


def _resolve_segments(
    segments: Sequence[PathSegment], current: JsonValue, *, prefix: str
) -> JsonValue:
    segment, remaining = segments[0], segments[1:]
    key_text = segment.key or ""
    prefix = f"{prefix}.{key_text}" if prefix else key_text

    if segment.key is not None:
        current = _read_key(current, segment.key, prefix)

    for index in segment.indices:
        prefix += f"[{index}]"
        current = _read_index(current, index, prefix)

    if not remaining:
        return current
    return _resolve_segments(remaining, current, prefix=prefix)


def _read_key(container: JsonValue, key: str, prefix: str) -> JsonValue:
    if not isinstance(container, Mapping) or key not in container:
        raise PathLookupError(f"Tried to access {prefix} of {_render(container)}")
    return container[key]


def _read_index(container: JsonValue, index: int, prefix: str) -> JsonValue:
    if (
        not isinstance(container, Sequence)
        or isinstance(container, str | bytes)
        or index >= len(container)
    ):
        raise PathLookupError(f"Tried to access {prefix} of {_render(container)}")
    return container[index]


def _render(value: object) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, default=str)
    except ValueError:
        return repr(value)
