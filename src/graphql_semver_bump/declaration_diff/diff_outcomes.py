"""Declaration diff domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from graphql_semver_bump.schema_management.schema_models import Declaration


class BumpKind(str, Enum):
    """Severity of a schema change, MAJOR > MINOR > PATCH."""

    MAJOR = "MAJOR"
    MINOR = "MINOR"
    PATCH = "PATCH"


class BumpReason(str, Enum):
    """Why a diff was classified the way it was."""

    REMOVALS = "There are removals and/or renames => Major bump found."
    BREAKING_ADDITIONS = (
        "New union-values, enum-values, input or non-null-input-field => Major bump found."
    )
    ADDITIONS = "New fields/types/queries => Minor bump found."
    UNCHANGED = "No declaration changes => Patch bump found."


@dataclass(frozen=True)
class DiffOutcome:
    """Classification of two declaration sets."""

    bump: BumpKind
    reason: BumpReason
    removed: tuple[Declaration, ...]
    added: tuple[Declaration, ...]
    breaking_additions: tuple[Declaration, ...] = ()

    @property
    def has_changes(self) -> bool:
        return bool(self.removed or self.added)
