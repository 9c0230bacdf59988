"""CLI smoke tests."""

from click.testing import CliRunner
from schema_json_mapper.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "resolve" in result.output
    assert "generate-config" in result.output
    assert "check-config" in result.output
    assert "convert" in result.output
