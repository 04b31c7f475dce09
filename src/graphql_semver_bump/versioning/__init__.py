"""Versioning domain exports."""

from .semver_models import INITIAL_VERSION, STABLE_FLOOR, SemVer
from .version_marker import VersionMarkerError, parse_version_marker
from .version_policy import apply_version_floor, expected_version, guess_version

__all__ = [
    "INITIAL_VERSION",
    "STABLE_FLOOR",
    "SemVer",
    "VersionMarkerError",
    "apply_version_floor",
    "expected_version",
    "guess_version",
    "parse_version_marker",
]
