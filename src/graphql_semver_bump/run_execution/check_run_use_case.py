"""Schema version check use-case service."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from graphql_semver_bump.declaration_diff import DiffOutcome, compare_declarations
from graphql_semver_bump.revision_store import (
    ProbeStatus,
    ReadStatus,
    RevisionRead,
    RevisionReader,
    RevisionStoreError,
    RevisionStoreProbe,
)
from graphql_semver_bump.schema_management import (
    ExtractionResult,
    SchemaError,
    UnsupportedConstruct,
    declarations_from_schema,
)
from graphql_semver_bump.schema_management.declaration_extraction import UNSUPPORTED_TYPE
from graphql_semver_bump.versioning import (
    INITIAL_VERSION,
    SemVer,
    VersionMarkerError,
    expected_version,
    parse_version_marker,
)

from .run_contracts import ExitStatus, RunArtifacts, RunOutcome, RunRequest

logger = logging.getLogger(__name__)

_PROBE_FAILURES = {
    ProbeStatus.TOOL_MISSING: (ExitStatus.TOOL_MISSING, "You need git for this to work."),
    ProbeStatus.NOT_A_STORE: (ExitStatus.NOT_A_STORE, "You need to be inside a git repository."),
    ProbeStatus.UNKNOWN_ERROR: (ExitStatus.PROBE_FAILED, "Unexpected git error."),
}


class RunExecutionError(Exception):
    """Raised when a check cannot be completed; carries the exit status to report."""

    def __init__(
        self, message: str, exit_status: ExitStatus, details: tuple[str, ...] = ()
    ) -> None:
        super().__init__(message)
        self.exit_status = exit_status
        self.details = details


def execute_semver_check(
    request: RunRequest, *, reader: RevisionReader, probe: RevisionStoreProbe
) -> RunOutcome:
    """Check that the head version marker matches the bump implied by the schema diff."""
    ensure_store_available(probe)
    artifacts = read_run_artifacts(request, reader)

    base_schema = _require_schema_text(artifacts.base_schema, ExitStatus.BASE_SCHEMA_UNREADABLE)
    head_schema = _require_schema_text(artifacts.head_schema, ExitStatus.HEAD_SCHEMA_UNREADABLE)
    base_version = version_from_marker(artifacts.base_marker)
    head_version = version_from_marker(artifacts.head_marker)

    diff = None if base_schema == head_schema else diff_schemas(base_schema, head_schema)
    expected = expected_version(base_version, diff.bump if diff else None)
    exit_status = ExitStatus.MATCH if head_version == expected else ExitStatus.MISMATCH
    logger.debug("Expected %s, found %s at %s", expected, head_version, request.head_ref)

    return RunOutcome(
        exit_status=exit_status,
        base_version=base_version,
        head_version=head_version,
        expected_version=expected,
        diff=diff,
    )


def ensure_store_available(probe: RevisionStoreProbe) -> None:
    """Abort before any read when the revision store cannot be used."""
    try:
        status = probe.probe()
    except RevisionStoreError as exc:
        raise RunExecutionError(str(exc), ExitStatus.PROBE_ERROR) from exc

    if status is ProbeStatus.AVAILABLE:
        return
    exit_status, message = _PROBE_FAILURES[status]
    raise RunExecutionError(message, exit_status)


def read_run_artifacts(request: RunRequest, reader: RevisionReader) -> RunArtifacts:
    """Read both schema texts and both version markers concurrently, once each."""
    with ThreadPoolExecutor(max_workers=4) as executor:
        base_schema = executor.submit(reader.read, request.base_ref, request.schema_file)
        head_schema = executor.submit(reader.read, request.head_ref, request.schema_file)
        base_marker = executor.submit(reader.read, request.base_ref, request.semver_file)
        head_marker = executor.submit(reader.read, request.head_ref, request.semver_file)
        return RunArtifacts(
            base_schema=base_schema.result(),
            head_schema=head_schema.result(),
            base_marker=base_marker.result(),
            head_marker=head_marker.result(),
        )


def version_from_marker(marker: RevisionRead) -> SemVer:
    """Parse a version marker, defaulting to 0.0.0 when it cannot be read."""
    if marker.status is not ReadStatus.FOUND or marker.text is None:
        logger.warning(
            'Unable to retrieve "%s" file. Supposing it to be "%s"',
            marker.location,
            INITIAL_VERSION,
        )
        return INITIAL_VERSION
    try:
        return parse_version_marker(marker.text)
    except VersionMarkerError as exc:
        raise RunExecutionError(
            f'Invalid version marker "{marker.location}": {exc}',
            ExitStatus.INVALID_VERSION_MARKER,
        ) from exc


def diff_schemas(base_schema: str, head_schema: str) -> DiffOutcome:
    """Classify the change between two schema texts."""
    before = _extract(base_schema, "base")
    after = _extract(head_schema, "head")
    return compare_declarations(before.declarations, after.declarations)


def _extract(schema_text: str, side: str) -> ExtractionResult:
    try:
        extraction = declarations_from_schema(schema_text)
    except SchemaError as exc:
        raise RunExecutionError(f"{side} schema: {exc}", ExitStatus.INVALID_SCHEMA) from exc

    if not extraction.is_complete:
        first = extraction.unsupported[0]
        raise RunExecutionError(
            f"{side} schema: {first.describe()}",
            _unsupported_exit_status(first),
            details=tuple(construct.describe() for construct in extraction.unsupported),
        )
    return extraction


def _unsupported_exit_status(construct: UnsupportedConstruct) -> ExitStatus:
    if construct.category == UNSUPPORTED_TYPE:
        return ExitStatus.UNSUPPORTED_TYPE
    return ExitStatus.UNSUPPORTED_FIELD_TYPE


def _require_schema_text(read: RevisionRead, exit_status: ExitStatus) -> str:
    if read.status is ReadStatus.FOUND and read.text is not None:
        return read.text
    details = (read.detail,) if read.detail else ()
    raise RunExecutionError(f'Unable to retrieve "{read.location}" file.', exit_status, details)
