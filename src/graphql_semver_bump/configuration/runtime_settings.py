"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class GitSettings:
    """Revision-control tool settings."""

    executable: str = "git"
    working_directory: Path = field(default_factory=Path.cwd)


@dataclass(frozen=True)
class SchemaSettings:
    """Decoding of schema and version-marker files read from the store."""

    encoding: str = "utf-8"


@dataclass(frozen=True)
class ReportSettings:
    """Console report options."""

    list_declarations: bool = True


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    git: GitSettings = field(default_factory=GitSettings)
    schema: SchemaSettings = field(default_factory=SchemaSettings)
    report: ReportSettings = field(default_factory=ReportSettings)
