"""Declaration diff domain exports."""

from .declaration_comparison import breaking_additions, compare_declarations, unmatched_declarations
from .diff_outcomes import BumpKind, BumpReason, DiffOutcome

__all__ = [
    "BumpKind",
    "BumpReason",
    "DiffOutcome",
    "breaking_additions",
    "compare_declarations",
    "unmatched_declarations",
]
