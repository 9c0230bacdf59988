"""Codec deserialization tests."""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from schema_json_mapper.codec_engine import JsonCodec
from schema_json_mapper.mapping_errors import (
    DepthExceededError,
    PathLookupError,
    PropertyRequiredError,
    SchemaNotFoundError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from schema_json_mapper.schema_registry import (
    BOOLEAN,
    DATE_TIME,
    FLOAT,
    INT,
    STRING,
    SchemaRegistry,
    array_of,
    class_of,
    object_of,
    prop,
)


class Record:
    def __init__(self) -> None:
        self.id = 0
        self.ratio = 0.0
        self.label = "default"
        self.flag = False
        self.when: datetime | None = None
        self.tags: list[str] = []
        self.meta: dict = {}


class Pair:
    def __init__(self, id: int, name: str) -> None:
        self.id = id
        self.name = name


class Wrapper:
    def __init__(self) -> None:
        self.inner: object = None


def _record_registry() -> SchemaRegistry:
    registry = SchemaRegistry()
    registry.register(
        Record,
        [
            prop("id", INT),
            prop("ratio", FLOAT),
            prop("label", STRING),
            prop("flag", BOOLEAN),
            prop("when", DATE_TIME),
            prop("tags", array_of(STRING)),
            prop("meta", object_of(source=STRING, counts=array_of(INT))),
        ],
    )
    return registry


def test_deserializes_scalars_arrays_and_plain_objects() -> None:
    record = JsonCodec(_record_registry()).deserialize(
        {
            "id": "17",
            "ratio": 2,
            "label": 99,
            "flag": 1,
            "when": "2024-05-17T08:30:00+00:00",
            "tags": ["a", "b"],
            "meta": {"source": "import", "counts": [1, "2"], "extra": True},
        },
        Record,
    )

    assert record.id == 17
    assert record.ratio == 2.0
    assert isinstance(record.ratio, float)
    assert record.label == "99"
    assert record.flag is True
    assert record.when == datetime(2024, 5, 17, 8, 30, tzinfo=UTC)
    assert record.tags == ["a", "b"]
    assert record.meta == {"source": "import", "counts": [1, 2]}


def test_epoch_seconds_decode_to_utc_datetimes() -> None:
    record = JsonCodec(_record_registry()).deserialize({"when": 0}, Record)

    assert record.when == datetime(1970, 1, 1, tzinfo=UTC)


def test_missing_and_null_entries_keep_constructor_defaults() -> None:
    record = JsonCodec(_record_registry()).deserialize({"label": None}, Record)

    assert record.label == "default"
    assert record.id == 0
    assert record.tags == []


@pytest.mark.parametrize(
    "document",
    [
        {"id": "abc"},
        {"ratio": [1]},
        {"when": "yesterday"},
        {"tags": "a,b"},
        {"meta": ["source"]},
    ],
)
def test_shape_mismatches_raise_type_mismatch(document: dict) -> None:
    with pytest.raises(TypeMismatchError):
        JsonCodec(_record_registry()).deserialize(document, Record)


def test_non_mapping_document_raises_type_mismatch() -> None:
    with pytest.raises(TypeMismatchError):
        JsonCodec(_record_registry()).deserialize([1, 2], Record)


def test_unknown_primitive_type_raises_unsupported_type() -> None:
    registry = SchemaRegistry()
    registry.register(Wrapper, [prop("inner", "unknown")])

    with pytest.raises(UnsupportedTypeError):
        JsonCodec(registry).deserialize({"inner": "dkasd"}, Wrapper)


def test_unregistered_target_raises_schema_not_found() -> None:
    with pytest.raises(SchemaNotFoundError):
        JsonCodec(SchemaRegistry()).deserialize({}, Wrapper)


def test_nested_class_uses_its_constructor_plan() -> None:
    registry = SchemaRegistry()
    registry.register(Pair, [prop("id", INT), prop("name", STRING)], constructor=["id", "name"])
    registry.register(Wrapper, [prop("inner", class_of(Pair))])

    wrapper = JsonCodec(registry).deserialize({"inner": {"id": 100, "name": "Ada"}}, Wrapper)

    assert isinstance(wrapper.inner, Pair)
    assert (wrapper.inner.id, wrapper.inner.name) == (100, "Ada")


def test_nested_constructor_path_failure_propagates() -> None:
    registry = SchemaRegistry()
    registry.register(Pair, [prop("id", INT)], constructor=["id", "name"])
    registry.register(Wrapper, [prop("inner", class_of(Pair))])

    with pytest.raises(PathLookupError):
        JsonCodec(registry).deserialize({"inner": {"id": 100}}, Wrapper)


def test_unregistered_class_is_built_from_the_raw_value() -> None:
    registry = SchemaRegistry()
    registry.register(Wrapper, [prop("inner", class_of(Decimal))])

    wrapper = JsonCodec(registry).deserialize({"inner": "3.50"}, Wrapper)

    assert wrapper.inner == Decimal("3.50")


def test_required_property_must_be_present() -> None:
    registry = SchemaRegistry()
    registry.register(Pair, [prop("id", INT, required=True), prop("name", STRING, required=True)])
    codec = JsonCodec(registry)

    class Plain(Pair):
        def __init__(self) -> None:
            super().__init__(0, "")

    registry.register(Plain, [])

    with pytest.raises(PropertyRequiredError, match="'id'"):
        codec.deserialize({"name": "Hello"}, Plain)
    with pytest.raises(PropertyRequiredError, match="'name'"):
        codec.deserialize({"id": 100}, Plain)
    plain = codec.deserialize({"id": 100, "name": "Hello"}, Plain)
    assert (plain.id, plain.name) == (100, "Hello")


def test_max_levels_limit_nested_structures() -> None:
    registry = SchemaRegistry()
    registry.register(Wrapper, [prop("inner", object_of(id=INT, name=STRING))])

    with pytest.raises(DepthExceededError, match="deserialization"):
        JsonCodec(registry, max_levels=2).deserialize({"inner": {"id": 1, "name": "x"}}, Wrapper)

    wrapper = JsonCodec(registry, max_levels=3).deserialize(
        {"inner": {"id": 1, "name": "x"}}, Wrapper
    )
    assert wrapper.inner == {"id": 1, "name": "x"}


def test_max_levels_two_reads_flat_properties() -> None:
    registry = SchemaRegistry()
    registry.register(Pair, [prop("id", INT), prop("name", STRING)], constructor=["id", "name"])

    pair = JsonCodec(registry, max_levels=2).deserialize({"id": 1, "name": "x"}, Pair)

    assert (pair.id, pair.name) == (1, "x")


def test_max_levels_one_rejects_any_declared_property() -> None:
    registry = SchemaRegistry()
    registry.register(Wrapper, [prop("inner", class_of(Wrapper))])
    codec = JsonCodec(registry, max_levels=1)

    with pytest.raises(DepthExceededError):
        codec.deserialize({"inner": {}}, Wrapper)
    with pytest.raises(DepthExceededError):
        codec.deserialize({"inner": None}, Wrapper)
    with pytest.raises(DepthExceededError):
        codec.deserialize({}, Wrapper)
