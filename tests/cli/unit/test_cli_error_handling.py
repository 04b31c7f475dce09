"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner
from graphql_semver_bump.cli import cli, main


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["main", "feature", "schema.graphql"],
        ["main", "feature", "schema.graphql", "schema.ver", "extra"],
    ],
)
def test_wrong_argument_count_returns_status_4_with_usage(
    capsys: pytest.CaptureFixture[str], argv: list[str]
) -> None:
    exit_code = main(argv)
    captured = capsys.readouterr()

    assert exit_code == 4
    assert "Wrong number of arguments. Usage:" in captured.out
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--bogus", "main", "feature", "schema.graphql", "schema.ver"])
    captured = capsys.readouterr()

    assert exit_code == 4
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_configuration_returns_status_11(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("report:\n  list_declarations: maybe\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["--config", str(config_path), "main", "feature", "schema.graphql", "schema.ver"],
    )

    assert result.exit_code == 11
    assert "report.list_declarations must be a boolean" in result.output


def test_missing_git_executable_returns_status_5(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text(
        f"git:\n  executable: {tmp_path / 'no-such-git'}\n  working_directory: .\n",
        encoding="utf-8",
    )

    exit_code = main(
        ["--config", str(config_path), "main", "feature", "schema.graphql", "schema.ver"]
    )

    assert exit_code == 5


def test_directory_as_configuration_returns_status_11(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["--config", str(tmp_path), "main", "feature", "schema.graphql", "schema.ver"])
    captured = capsys.readouterr()

    assert exit_code == 11
    assert "Failed to read configuration file" in captured.err
    assert "Traceback" not in captured.err
