"""Revision store domain exports."""

from .git_revisions import CommandRunner, GitRevisionStore, RevisionStoreError
from .revision_models import (
    ProbeStatus,
    ReadStatus,
    RevisionRead,
    RevisionReader,
    RevisionStoreProbe,
)

__all__ = [
    "CommandRunner",
    "GitRevisionStore",
    "ProbeStatus",
    "ReadStatus",
    "RevisionRead",
    "RevisionReader",
    "RevisionStoreError",
    "RevisionStoreProbe",
]
