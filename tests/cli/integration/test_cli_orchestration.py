"""CLI orchestration tests against a real git repository."""

from __future__ import annotations

import json
import shutil
import subprocess
from pathlib import Path

import pytest
from graphql_semver_bump.cli import main

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")

BASE_SCHEMA = """
type Query {
  user(id: ID!): User
  roles: [Role!]!
}

type User {
  id: ID!
}

enum Role {
  ADMIN
}
"""


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=repo,
        check=True,
        capture_output=True,
    )


def _write_or_remove(path: Path, content: str | None) -> None:
    if content is None:
        path.unlink(missing_ok=True)
    else:
        path.write_text(content, encoding="utf-8")


def _commit(
    repo: Path, tag: str, *, schema: str | None, version: tuple[int, int, int] | None
) -> None:
    marker = None
    if version is not None:
        major, minor, patch = version
        marker = json.dumps({"major": major, "minor": minor, "patch": patch})
    _write_or_remove(repo / "schema.graphql", schema)
    _write_or_remove(repo / "schema.ver", marker)
    _git(repo, "add", "--all")
    _git(repo, "commit", "--allow-empty", "-m", tag)
    _git(repo, "tag", tag)


@pytest.fixture()
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    _git(repo_path, "init")
    monkeypatch.chdir(repo_path)
    return repo_path


def _check(base: str = "base", head: str = "head") -> int:
    return main([base, head, "schema.graphql", "schema.ver"])


def test_additive_change_with_minor_bump_passes(
    repo: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _commit(repo, "base", schema=BASE_SCHEMA, version=(1, 2, 3))
    head_schema = BASE_SCHEMA.replace("  id: ID!\n", "  id: ID!\n  email: String\n")
    _commit(repo, "head", schema=head_schema, version=(1, 3, 0))

    exit_code = _check()
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "New fields/types/queries => Minor bump found." in captured.out
    assert "  - User.email : String" in captured.out
    assert "Nothing to do here." in captured.out


def test_new_enum_value_without_major_bump_is_a_mismatch(
    repo: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _commit(repo, "base", schema=BASE_SCHEMA, version=(1, 2, 3))
    head_schema = BASE_SCHEMA.replace("  ADMIN\n", "  ADMIN\n  USER\n")
    _commit(repo, "head", schema=head_schema, version=(1, 3, 0))

    exit_code = _check()
    captured = capsys.readouterr()

    assert exit_code == 1
    assert '"head" version mismatch. Expected: 2.0.0' in captured.out


def test_unchanged_schema_without_markers_expects_stable_floor(
    repo: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _commit(repo, "base", schema=BASE_SCHEMA, version=None)
    _commit(repo, "head", schema=BASE_SCHEMA, version=None)

    exit_code = _check()
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Expected: 1.0.0" in captured.out


def test_missing_base_schema_returns_status_2(repo: Path) -> None:
    _commit(repo, "base", schema=None, version=(1, 0, 0))
    _commit(repo, "head", schema=BASE_SCHEMA, version=(1, 0, 0))

    assert _check() == 2


def test_missing_head_schema_returns_status_3(repo: Path) -> None:
    _commit(repo, "base", schema=BASE_SCHEMA, version=(1, 0, 0))
    _commit(repo, "head", schema=None, version=(1, 0, 0))

    assert _check() == 3


def test_unknown_ref_is_reported_as_unreadable_schema(repo: Path) -> None:
    _commit(repo, "base", schema=BASE_SCHEMA, version=(1, 0, 0))

    assert _check(head="does-not-exist") == 3


def test_outside_a_repository_returns_status_6(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    outside = tmp_path / "plain"
    outside.mkdir()
    monkeypatch.chdir(outside)
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))

    assert _check() == 6
