"""Semantic version entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SemVer:
    """`major.minor.patch` version triple of non-negative integers."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


INITIAL_VERSION = SemVer(0, 0, 0)
STABLE_FLOOR = SemVer(1, 0, 0)
