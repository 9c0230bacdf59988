"""Configured type registration tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from schema_json_mapper.codec_engine import JsonCodec
from schema_json_mapper.configuration import (
    ConfigurationError,
    import_type,
    load_configuration,
    register_configured_types,
)
from schema_json_mapper.schema_registry import (
    INT,
    STRING,
    ArrayType,
    ClassType,
    ObjectType,
    PathList,
    SchemaRegistry,
    WholeDocument,
)

_MODELS_SOURCE = '''
class Owner:
    def __init__(self, document):
        self.name = document.get("name", "")


class Account:
    def __init__(self, id, owner_name):
        self.id = id
        self.owner_name = owner_name
        self.tags = []
        self.owner = None
        self.meta = {}

    class Settings:
        def __init__(self):
            self.theme = "light"
'''

_CONFIG = """
codec:
  max_levels: 8
types:
  mapper_registration_models.Owner:
    constructor: document
    properties:
      name: string
  mapper_registration_models.Account:
    constructor: ["id", "owner.name"]
    properties:
      id: {type: int, required: true}
      tags: {type: {array: string}}
      owner: {type: {class: mapper_registration_models.Owner}}
      meta: {type: {object: {theme: string}}}
  mapper_registration_models.Account.Settings:
    properties:
      theme: string
"""


@pytest.fixture
def models_on_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "mapper_registration_models.py").write_text(_MODELS_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    config_path = tmp_path / "mapper.yaml"
    config_path.write_text(_CONFIG, encoding="utf-8")
    return config_path


def test_registers_configured_types(models_on_path: Path) -> None:
    registry = SchemaRegistry()

    registered = register_configured_types(load_configuration(models_on_path), registry)

    owner_type, account_type, settings_type = registered
    assert settings_type is account_type.Settings
    assert registry.constructor_plan_for(owner_type) == WholeDocument()
    assert registry.constructor_plan_for(account_type) == PathList(paths=("id", "owner.name"))
    schema = registry.schema_for(account_type)
    assert [descriptor.name for descriptor in schema] == ["id", "tags", "owner", "meta"]
    assert schema[0].type == INT and schema[0].required
    assert schema[1].type == ArrayType(element=STRING)
    assert schema[2].type == ClassType(reference=owner_type)
    assert schema[3].type == ObjectType(properties=(("theme", STRING),))


def test_configured_types_drive_the_codec(models_on_path: Path) -> None:
    registry = SchemaRegistry()
    configuration = load_configuration(models_on_path)
    register_configured_types(configuration, registry)
    account_type = import_type("mapper_registration_models.Account")
    codec = JsonCodec.from_settings(configuration.codec, registry)

    account = codec.deserialize(
        {"id": 7, "tags": ["x"], "owner": {"name": "Ada"}, "meta": {"theme": "dark"}},
        account_type,
    )

    assert codec.max_levels == 8
    assert account.owner_name == "Ada"
    assert account.owner.name == "Ada"
    assert codec.serialize(account) == {
        "id": 7,
        "tags": ["x"],
        "owner": {"name": "Ada"},
        "meta": {"theme": "dark"},
    }


def test_import_type_reports_missing_modules_and_attributes(models_on_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot import"):
        import_type("no_such_package_for_mapper.Model")
    with pytest.raises(ConfigurationError, match="does not name a class"):
        import_type("mapper_registration_models.Missing")
