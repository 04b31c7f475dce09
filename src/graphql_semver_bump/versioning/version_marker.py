"""Version-marker file parsing."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .semver_models import SemVer

_COMPONENTS = ("major", "minor", "patch")


class VersionMarkerError(Exception):
    """Raised when a version-marker file is not a valid `{major, minor, patch}` object."""


def parse_version_marker(text: str) -> SemVer:
    """Parse the JSON text of a version-marker file."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise VersionMarkerError(f"Invalid version marker JSON: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise VersionMarkerError("Version marker root must be an object.")

    major, minor, patch = (_require_component(parsed, name) for name in _COMPONENTS)
    return SemVer(major=major, minor=minor, patch=patch)


def _require_component(parsed: Mapping[str, Any], name: str) -> int:
    value = parsed.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise VersionMarkerError(f"Version marker '{name}' must be an integer.")
    if value < 0:
        raise VersionMarkerError(f"Version marker '{name}' must not be negative.")
    return value
