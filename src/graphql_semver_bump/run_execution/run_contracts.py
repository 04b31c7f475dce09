"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from graphql_semver_bump.declaration_diff.diff_outcomes import DiffOutcome
from graphql_semver_bump.revision_store.revision_models import RevisionRead
from graphql_semver_bump.versioning.semver_models import SemVer


class ExitStatus(IntEnum):
    """Process exit statuses of one check run.

    Unsupported schema constructs deliberately reuse 5 and 6.
    """

    MATCH = 0
    MISMATCH = 1
    BASE_SCHEMA_UNREADABLE = 2
    HEAD_SCHEMA_UNREADABLE = 3
    WRONG_ARGUMENTS = 4
    TOOL_MISSING = 5
    NOT_A_STORE = 6
    PROBE_FAILED = 7
    PROBE_ERROR = 8
    INVALID_VERSION_MARKER = 9
    INVALID_SCHEMA = 10
    INVALID_CONFIGURATION = 11
    UNSUPPORTED_TYPE = 5
    UNSUPPORTED_FIELD_TYPE = 6


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one check."""

    base_ref: str
    head_ref: str
    schema_file: str
    semver_file: str


@dataclass(frozen=True)
class RunArtifacts:
    """The four values read from the revision store."""

    base_schema: RevisionRead
    head_schema: RevisionRead
    base_marker: RevisionRead
    head_marker: RevisionRead


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed check."""

    exit_status: ExitStatus
    base_version: SemVer
    head_version: SemVer
    expected_version: SemVer
    diff: DiffOutcome | None

    @property
    def schema_changed(self) -> bool:
        return self.diff is not None

    @property
    def is_match(self) -> bool:
        return self.exit_status is ExitStatus.MATCH
