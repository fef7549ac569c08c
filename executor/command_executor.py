"""Command execution wrapper and shell-backed query collaborator."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger("ws.executor")

SCRIPT_PREAMBLE = ("set -e", "set -o pipefail")


class QueryError(RuntimeError):
    """Raised when an external query fails or returns unusable output."""


class WorkspaceQuery(Protocol):
    """Source of workspace and monitor facts."""

    def query_int(self, descriptor: str) -> int:
        ...

    def query_list(self, descriptor: str) -> list[str]:
        ...


def run_command(
    command: list[str],
    cwd: Path | None = None,
    timeout: float | None = None,
) -> tuple[int, str, str]:
    """Run command and return (exit_code, stdout, stderr)."""
    proc = subprocess.run(command, cwd=cwd, capture_output=True, text=True, timeout=timeout)
    return proc.returncode, proc.stdout, proc.stderr


class ShellQuery:
    """Runs query descriptors as bash scripts."""

    def __init__(self, shell: str = "bash", timeout: float | None = None) -> None:
        self.shell = shell
        self.timeout = timeout

    def script(self, descriptor: str) -> str:
        return "\n".join([*SCRIPT_PREAMBLE, descriptor])

    def _run(self, descriptor: str) -> str:
        logger.debug("Running query: %s", descriptor)
        try:
            code, stdout, stderr = run_command(
                [self.shell, "-c", self.script(descriptor)], timeout=self.timeout
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise QueryError(f"failed to execute bash command: {exc}") from exc
        if code != 0:
            detail = stderr.strip() or f"exit status {code}"
            raise QueryError(f"failed to execute bash command: {detail}")
        return stdout

    def query_int(self, descriptor: str) -> int:
        output = self._run(descriptor).strip()
        try:
            return int(output)
        except ValueError as exc:
            raise QueryError(f"failed to parse integer from command output: {output!r}") from exc

    def query_list(self, descriptor: str) -> list[str]:
        return self._run(descriptor).splitlines()
