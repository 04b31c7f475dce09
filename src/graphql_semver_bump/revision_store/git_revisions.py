"""Git-backed revision reader and store probe."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

from .revision_models import ProbeStatus, RevisionRead

logger = logging.getLogger(__name__)

CommandRunner = Callable[[tuple[str, ...], Path], subprocess.CompletedProcess[bytes]]

_NOT_A_REPOSITORY_EXIT_CODE = 128
_COMMAND_NOT_FOUND_EXIT_CODE = 127


class RevisionStoreError(Exception):
    """Raised when probing the revision store fails unexpectedly."""


class GitRevisionStore:
    """Reads files with `git show <ref>:<path>` and probes the working tree."""

    def __init__(
        self,
        *,
        executable: str = "git",
        working_directory: Path | None = None,
        encoding: str = "utf-8",
        run_command: CommandRunner | None = None,
    ) -> None:
        self._executable = executable
        self._working_directory = (working_directory or Path.cwd()).resolve()
        self._encoding = encoding
        self._run_command = run_command or _run_captured_command

    def probe(self) -> ProbeStatus:
        """Report whether git is installed and the working directory is a repository."""
        command = (self._executable, "rev-parse", "--git-dir")
        try:
            completed = self._run_command(command, self._working_directory)
        except FileNotFoundError:
            return ProbeStatus.TOOL_MISSING
        except OSError as exc:
            raise RevisionStoreError(f"Unable to run {self._executable}: {exc}") from exc

        logger.debug("git probe exited with %s", completed.returncode)
        if completed.returncode == 0:
            return ProbeStatus.AVAILABLE
        if completed.returncode == _NOT_A_REPOSITORY_EXIT_CODE:
            return ProbeStatus.NOT_A_STORE
        if completed.returncode == _COMMAND_NOT_FOUND_EXIT_CODE:
            return ProbeStatus.TOOL_MISSING
        return ProbeStatus.UNKNOWN_ERROR

    def read(self, ref: str, path: str) -> RevisionRead:
        """Return the content of `path` at `ref`. Attempted exactly once."""
        command = (self._executable, "show", f"{ref}:{path}")
        try:
            completed = self._run_command(command, self._working_directory)
        except OSError as exc:
            return RevisionRead.error(ref, path, str(exc))

        if completed.returncode != 0:
            detail = _decode_stderr(completed.stderr)
            logger.debug("git show %s:%s failed: %s", ref, path, detail)
            return RevisionRead.not_found(ref, path, detail or None)

        try:
            text = completed.stdout.decode(self._encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            return RevisionRead.error(ref, path, f"Cannot decode {ref}:{path}: {exc}")
        return RevisionRead.found(ref, path, text)


def _run_captured_command(
    command: tuple[str, ...], cwd: Path
) -> subprocess.CompletedProcess[bytes]:
    return subprocess.run(list(command), cwd=cwd, capture_output=True, check=False)


def _decode_stderr(stderr: bytes | None) -> str:
    if not stderr:
        return ""
    return stderr.decode("utf-8", errors="replace").strip()
