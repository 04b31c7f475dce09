"""Revision store entities and collaborator contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class ReadStatus(str, Enum):
    """Outcome of reading one file at one revision."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


class ProbeStatus(str, Enum):
    """Availability of the revision-control tool and repository."""

    AVAILABLE = "available"
    TOOL_MISSING = "tool_missing"
    NOT_A_STORE = "not_a_store"
    UNKNOWN_ERROR = "unknown_error"


@dataclass(frozen=True)
class RevisionRead:
    """Content of `path` at `ref`, or why it could not be read."""

    ref: str
    path: str
    status: ReadStatus
    text: str | None = None
    detail: str | None = None

    @property
    def location(self) -> str:
        return f"{self.ref}:{self.path}"

    @staticmethod
    def found(ref: str, path: str, text: str) -> RevisionRead:
        return RevisionRead(ref=ref, path=path, status=ReadStatus.FOUND, text=text)

    @staticmethod
    def not_found(ref: str, path: str, detail: str | None = None) -> RevisionRead:
        return RevisionRead(ref=ref, path=path, status=ReadStatus.NOT_FOUND, detail=detail)

    @staticmethod
    def error(ref: str, path: str, detail: str) -> RevisionRead:
        return RevisionRead(ref=ref, path=path, status=ReadStatus.ERROR, detail=detail)


class RevisionReader(Protocol):
    """Reads file contents at a given revision."""

    def read(self, ref: str, path: str) -> RevisionRead: ...


class RevisionStoreProbe(Protocol):
    """Checks that the revision-control tool and repository are usable."""

    def probe(self) -> ProbeStatus: ...
