"""Declaration set comparison and bump classification service."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from graphql_semver_bump.schema_management.schema_models import Declaration

from .diff_outcomes import BumpKind, BumpReason, DiffOutcome

logger = logging.getLogger(__name__)


def compare_declarations(
    before: Sequence[Declaration], after: Sequence[Declaration]
) -> DiffOutcome:
    """Classify the change from `before` to `after`.

    Declarations are matched on `(field, notation)` only. Any removal is a
    MAJOR change, a rename or retype shows up as one removal plus one addition.
    Without removals, an addition is MAJOR when it is parent-sensitive and its
    parent type is not itself added in the same diff, otherwise MINOR. No
    change at all is a PATCH.
    """
    removed = unmatched_declarations(before, after)
    added = unmatched_declarations(after, before)

    if removed:
        outcome = DiffOutcome(
            bump=BumpKind.MAJOR, reason=BumpReason.REMOVALS, removed=removed, added=added
        )
    elif added:
        breaking = breaking_additions(added)
        if breaking:
            outcome = DiffOutcome(
                bump=BumpKind.MAJOR,
                reason=BumpReason.BREAKING_ADDITIONS,
                removed=(),
                added=added,
                breaking_additions=breaking,
            )
        else:
            outcome = DiffOutcome(
                bump=BumpKind.MINOR, reason=BumpReason.ADDITIONS, removed=(), added=added
            )
    else:
        outcome = DiffOutcome(
            bump=BumpKind.PATCH, reason=BumpReason.UNCHANGED, removed=(), added=()
        )

    logger.debug(
        "Declaration diff: %d removed, %d added => %s",
        len(outcome.removed),
        len(outcome.added),
        outcome.bump.value,
    )
    return outcome


def unmatched_declarations(
    declarations: Iterable[Declaration], counterpart: Iterable[Declaration]
) -> tuple[Declaration, ...]:
    """Return the declarations without an equal `(field, notation)` in `counterpart`."""
    known = {declaration.identity for declaration in counterpart}
    return tuple(declaration for declaration in declarations if declaration.identity not in known)


def breaking_additions(added: Sequence[Declaration]) -> tuple[Declaration, ...]:
    """Return parent-sensitive additions whose parent type already existed."""
    added_fields = {declaration.field for declaration in added}
    return tuple(
        declaration
        for declaration in added
        if declaration.is_parent_sensitive and declaration.parent not in added_fields
    )
