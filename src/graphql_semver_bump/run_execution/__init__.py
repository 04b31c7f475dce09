"""Run execution domain exports."""

from .check_run_use_case import RunExecutionError, execute_semver_check
from .run_contracts import ExitStatus, RunArtifacts, RunOutcome, RunRequest

__all__ = [
    "ExitStatus",
    "RunArtifacts",
    "RunExecutionError",
    "RunOutcome",
    "RunRequest",
    "execute_semver_check",
]
