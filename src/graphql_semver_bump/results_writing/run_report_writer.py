"""Console report rendering for check runs."""

from __future__ import annotations

from collections.abc import Iterable

from graphql_semver_bump.declaration_diff.diff_outcomes import BumpKind, DiffOutcome
from graphql_semver_bump.run_execution.run_contracts import RunOutcome, RunRequest
from graphql_semver_bump.schema_management.schema_models import Declaration


def render_declaration(declaration: Declaration) -> str:
    return f"  - {declaration.field} : {declaration.notation}"


def render_diff_report(diff: DiffOutcome, *, list_declarations: bool = True) -> list[str]:
    """Describe why the diff was classified as it was.

    PATCH diffs render nothing. Removals are listed before additions.
    """
    if diff.bump is BumpKind.PATCH:
        return []

    lines = [diff.reason.value]
    if not list_declarations:
        return lines
    if diff.removed:
        lines.extend(_section("Removals:", diff.removed))
    if diff.added:
        lines.extend(_section("Additions:", diff.added))
    return lines


def render_run_report(
    request: RunRequest, outcome: RunOutcome, *, list_declarations: bool = True
) -> list[str]:
    """Render the diff explanation followed by the verdict."""
    lines: list[str] = []
    if outcome.diff is not None:
        lines.extend(render_diff_report(outcome.diff, list_declarations=list_declarations))

    if outcome.is_match:
        lines.extend(["", "Nothing to do here."])
    else:
        lines.extend(
            [
                "",
                f'"{request.head_ref}" version mismatch. Expected: {outcome.expected_version}',
            ]
        )
    return lines


def _section(title: str, declarations: Iterable[Declaration]) -> list[str]:
    return ["", title, *(render_declaration(declaration) for declaration in declarations)]
