"""Expected-version policy."""

from __future__ import annotations

from graphql_semver_bump.declaration_diff.diff_outcomes import BumpKind

from .semver_models import STABLE_FLOOR, SemVer


def guess_version(previous: SemVer, bump: BumpKind) -> SemVer:
    """Return the version following `previous` for a change of kind `bump`.

    A MAJOR bump resets minor and patch, a MINOR bump resets patch. `previous`
    is never modified.
    """
    if bump is BumpKind.MAJOR:
        return SemVer(major=previous.major + 1, minor=0, patch=0)
    if bump is BumpKind.MINOR:
        return SemVer(major=previous.major, minor=previous.minor + 1, patch=0)
    return SemVer(major=previous.major, minor=previous.minor, patch=previous.patch + 1)


def apply_version_floor(version: SemVer) -> SemVer:
    """Graduate any pre-1.0 version to exactly 1.0.0."""
    if version.major <= 0:
        return STABLE_FLOOR
    return version


def expected_version(previous: SemVer, bump: BumpKind | None) -> SemVer:
    """Combine the bump (None for identical schema text) with the floor rule."""
    candidate = previous if bump is None else guess_version(previous, bump)
    return apply_version_floor(candidate)
