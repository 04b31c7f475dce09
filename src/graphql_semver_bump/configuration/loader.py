"""Configuration loader service."""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, GitSettings, ReportSettings, SchemaSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None = None) -> Configuration:
    """Load and validate the configuration file, or return defaults when no path is given."""
    if config_path is None:
        return Configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(set(parsed) - {"git", "schema", "report"})
    if unknown:
        raise ConfigurationError(f"Unknown configuration section(s): {', '.join(unknown)}")

    return Configuration(
        path=path,
        git=_parse_git_section(parsed.get("git"), path.parent),
        schema=_parse_schema_section(parsed.get("schema")),
        report=_parse_report_section(parsed.get("report")),
    )


def _parse_git_section(value: Any, base_path: Path) -> GitSettings:
    section = _optional_mapping(value, "git")
    executable = _require_non_empty_string(section.get("executable", "git"), "git.executable")
    raw_directory = section.get("working_directory")
    if raw_directory is None:
        return GitSettings(executable=executable)

    directory = _resolve_path(
        base_path, _require_non_empty_string(raw_directory, "git.working_directory")
    )
    if not directory.is_dir():
        raise ConfigurationError(f"git.working_directory is not a directory: {directory}")
    return GitSettings(executable=executable, working_directory=directory)


def _parse_schema_section(value: Any) -> SchemaSettings:
    section = _optional_mapping(value, "schema")
    encoding = _require_non_empty_string(section.get("encoding", "utf-8"), "schema.encoding")
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigurationError(f"schema.encoding '{encoding}' is not a known codec.") from exc
    return SchemaSettings(encoding=encoding)


def _parse_report_section(value: Any) -> ReportSettings:
    section = _optional_mapping(value, "report")
    list_declarations = section.get("list_declarations", True)
    if not isinstance(list_declarations, bool):
        raise ConfigurationError("report.list_declarations must be a boolean.")
    return ReportSettings(list_declarations=list_declarations)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
