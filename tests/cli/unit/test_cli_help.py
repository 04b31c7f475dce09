"""CLI smoke tests."""

from click.testing import CliRunner
from graphql_semver_bump.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "BASE_REF HEAD_REF SCHEMA_FILE SEMVER_FILE" in result.output
    assert "--config" in result.output
    assert "--log-level" in result.output
