"""Scalar coercion for primitive type tags."""

from __future__ import annotations

from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation

from schema_json_mapper.mapping_errors import TypeMismatchError, UnsupportedTypeError
from schema_json_mapper.path_resolution import JsonValue
from schema_json_mapper.schema_registry import PrimitiveType


def encode_primitive(value: object, tag: PrimitiveType) -> JsonValue:
    """Convert an instance field value into a JSON scalar."""
    if tag.name == "int":
        return int(_parse_number(value))
    if tag.name == "float":
        return float(_parse_number(value))
    if tag.name == "string":
        return value  # type: ignore[return-value]
    if tag.name == "boolean":
        return bool(value)
    if tag.name == "dateTime":
        if isinstance(value, date):
            return value.isoformat()
        return str(value)
    raise UnsupportedTypeError(f"Serialization of type '{tag.name}' is not implemented.")


def decode_primitive(value: JsonValue, tag: PrimitiveType) -> object:
    """Convert a JSON scalar into the native value for ``tag``."""
    if tag.name == "int":
        number = _parse_number(value)
        return int(number) if number == number.to_integral_value() else float(number)
    if tag.name == "float":
        return float(_parse_number(value))
    if tag.name == "string":
        return str(value)
    if tag.name == "boolean":
        return bool(value)
    if tag.name == "dateTime":
        return _parse_datetime(value)
    raise UnsupportedTypeError(f"Deserialization of type '{tag.name}' is not implemented.")


def _parse_number(value: object) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise TypeMismatchError(f"Value {value!r} is not a number.")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int | float):
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation as exc:
            raise TypeMismatchError(f"Value {value!r} is not a number.") from exc
    else:
        raise TypeMismatchError(f"Value {value!r} is not a number.")
    if not number.is_finite():
        raise TypeMismatchError(f"Value {value!r} is not a finite number.")
    return number


def _parse_datetime(value: JsonValue) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        raise TypeMismatchError(f"Value {value!r} is not a date-time.")
    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise TypeMismatchError(f"Value {value!r} is not a valid timestamp.") from exc
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise TypeMismatchError(f"Value {value!r} is not an ISO-8601 date-time.") from exc
    raise TypeMismatchError(f"Value {value!r} is not a date-time.")
